"""
Incident report endpoints nested under a product.
"""

from fastapi import APIRouter, status

from belongings.core.dependencies import CurrentUserId
from belongings.db.repositories.incident_report_repository import IncidentReportRepository
from belongings.db.repositories.product_repository import ProductRepository
from belongings.db.session import DbSession
from belongings.schemas.incident_report import IncidentReportCreate, IncidentReportResponse
from belongings.services.incident_report_service import IncidentReportService

router = APIRouter()


def _get_incident_service(session: DbSession) -> IncidentReportService:
    return IncidentReportService(ProductRepository(session), IncidentReportRepository(session))


@router.get("/{product_id}/incidents", response_model=list[IncidentReportResponse])
async def list_incident_reports(session: DbSession, product_id: int, user_id: CurrentUserId):
    return await _get_incident_service(session).list_reports(user_id, product_id)


@router.post(
    "/{product_id}/incidents",
    response_model=IncidentReportResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_incident_report(
    session: DbSession, product_id: int, data: IncidentReportCreate, user_id: CurrentUserId
):
    return await _get_incident_service(session).create(user_id, product_id, data)
