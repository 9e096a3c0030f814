# Repository pattern: data access behind one class per model

from belongings.db.repositories.incident_report_repository import IncidentReportRepository
from belongings.db.repositories.product_repository import ProductRepository
from belongings.db.repositories.usage_log_repository import UsageLogRepository
from belongings.db.repositories.user_repository import UserRepository

__all__ = ["UserRepository", "ProductRepository", "UsageLogRepository", "IncidentReportRepository"]
