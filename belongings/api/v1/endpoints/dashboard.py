"""
Derived metrics endpoints. Values are recomputed on each request.
``as_of`` pins the reference day (defaults to today) so results are reproducible.
"""

from datetime import date

from fastapi import APIRouter, Query

from belongings.core.dependencies import CurrentUserId
from belongings.db.repositories.product_repository import ProductRepository
from belongings.db.repositories.usage_log_repository import UsageLogRepository
from belongings.db.session import DbSession
from belongings.schemas.metrics import DashboardEntry, ProductMetrics
from belongings.services.dashboard_service import DashboardService

router = APIRouter()


def _get_dashboard_service(session: DbSession) -> DashboardService:
    return DashboardService(ProductRepository(session), UsageLogRepository(session))


@router.get("/dashboard", response_model=list[DashboardEntry], tags=["dashboard"])
async def dashboard(session: DbSession, user_id: CurrentUserId, as_of: date | None = Query(None)):
    return await _get_dashboard_service(session).overview(user_id, as_of or date.today())


@router.get("/products/{product_id}/metrics", response_model=ProductMetrics, tags=["products"])
async def product_metrics(
    session: DbSession, product_id: int, user_id: CurrentUserId, as_of: date | None = Query(None)
):
    return await _get_dashboard_service(session).product_metrics(user_id, product_id, as_of or date.today())
