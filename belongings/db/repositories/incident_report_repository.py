"""
IncidentReport repository - incident and review notes of one product.
"""

from sqlalchemy import desc, select

from belongings.db.models.incident_report import IncidentReport
from belongings.db.repositories.base_repository import BaseRepository


class IncidentReportRepository(BaseRepository[IncidentReport]):

    def __init__(self, session):
        super().__init__(session, IncidentReport)

    async def list_for_product(self, product_id: int) -> list[IncidentReport]:
        """Most recent incident first."""
        result = await self.session.execute(
            select(IncidentReport)
            .where(IncidentReport.product_id == product_id)
            .order_by(desc(IncidentReport.date), desc(IncidentReport.id))
        )
        return list(result.scalars().all())
