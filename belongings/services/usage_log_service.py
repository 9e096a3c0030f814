"""
Usage log service - usage events, scoped to a product the caller owns.
"""

import logging

from belongings.core.exceptions import persistence_boundary
from belongings.db.models.usage_log import UsageLog
from belongings.db.repositories.product_repository import ProductRepository
from belongings.db.repositories.usage_log_repository import UsageLogRepository
from belongings.schemas.usage_log import UsageLogCreate, UsageLogResponse
from belongings.services.authorization import AuthorizationGuard
from belongings.services.normalize import normalize_int, normalize_text, require_date

logger = logging.getLogger(__name__)


class UsageLogService:

    def __init__(self, product_repo: ProductRepository, usage_repo: UsageLogRepository):
        self.usage_repo = usage_repo
        self.guard = AuthorizationGuard(product_repo)

    async def list_logs(self, user_id: int, product_id: int) -> list[UsageLogResponse]:
        with persistence_boundary("Failed to list usage logs"):
            await self.guard.authorize(user_id, product_id)
            logs = await self.usage_repo.list_for_product(product_id)
        return [UsageLogResponse.model_validate(log) for log in logs]

    async def create(self, user_id: int, product_id: int, data: UsageLogCreate) -> UsageLogResponse:
        with persistence_boundary("Failed to record usage"):
            await self.guard.authorize(user_id, product_id)
            log = UsageLog(
                date=require_date(data.date, "date"),
                duration=normalize_int(data.duration, "duration"),
                notes=normalize_text(data.notes),
                product_id=product_id,
            )
            log = await self.usage_repo.add(log)
        logger.info("Usage log %s recorded for product %s", log.id, product_id)
        return UsageLogResponse.model_validate(log)
