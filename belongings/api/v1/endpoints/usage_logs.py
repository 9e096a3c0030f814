"""
Usage log endpoints nested under a product.
"""

from fastapi import APIRouter, status

from belongings.core.dependencies import CurrentUserId
from belongings.db.repositories.product_repository import ProductRepository
from belongings.db.repositories.usage_log_repository import UsageLogRepository
from belongings.db.session import DbSession
from belongings.schemas.usage_log import UsageLogCreate, UsageLogResponse
from belongings.services.usage_log_service import UsageLogService

router = APIRouter()


def _get_usage_service(session: DbSession) -> UsageLogService:
    return UsageLogService(ProductRepository(session), UsageLogRepository(session))


@router.get("/{product_id}/usage", response_model=list[UsageLogResponse])
async def list_usage_logs(session: DbSession, product_id: int, user_id: CurrentUserId):
    return await _get_usage_service(session).list_logs(user_id, product_id)


@router.post("/{product_id}/usage", response_model=UsageLogResponse, status_code=status.HTTP_201_CREATED)
async def create_usage_log(session: DbSession, product_id: int, data: UsageLogCreate, user_id: CurrentUserId):
    return await _get_usage_service(session).create(user_id, product_id, data)
