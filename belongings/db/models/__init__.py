# Import every model so Base.metadata knows all tables (Alembic, test create_all)

from belongings.db.models.user import User
from belongings.db.models.product import Product
from belongings.db.models.usage_log import UsageLog
from belongings.db.models.incident_report import IncidentReport

__all__ = ["User", "Product", "UsageLog", "IncidentReport"]
