"""
Incident report service - incidents and reviews, scoped to a product the caller owns.
"""

import logging

from belongings.core.exceptions import persistence_boundary
from belongings.db.models.incident_report import IncidentReport
from belongings.db.repositories.incident_report_repository import IncidentReportRepository
from belongings.db.repositories.product_repository import ProductRepository
from belongings.schemas.incident_report import IncidentReportCreate, IncidentReportResponse
from belongings.services.authorization import AuthorizationGuard
from belongings.services.normalize import normalize_text, require_date, require_text

logger = logging.getLogger(__name__)


class IncidentReportService:

    def __init__(self, product_repo: ProductRepository, incident_repo: IncidentReportRepository):
        self.incident_repo = incident_repo
        self.guard = AuthorizationGuard(product_repo)

    async def list_reports(self, user_id: int, product_id: int) -> list[IncidentReportResponse]:
        with persistence_boundary("Failed to list incident reports"):
            await self.guard.authorize(user_id, product_id)
            reports = await self.incident_repo.list_for_product(product_id)
        return [IncidentReportResponse.model_validate(r) for r in reports]

    async def create(self, user_id: int, product_id: int, data: IncidentReportCreate) -> IncidentReportResponse:
        with persistence_boundary("Failed to record incident"):
            await self.guard.authorize(user_id, product_id)
            report = IncidentReport(
                date=require_date(data.date, "date"),
                description=require_text(data.description, "description"),
                severity=normalize_text(data.severity),
                product_id=product_id,
            )
            report = await self.incident_repo.add(report)
        logger.info("Incident %s recorded for product %s", report.id, product_id)
        return IncidentReportResponse.model_validate(report)
