"""
UsageLog repository - usage events of one product.
"""

from sqlalchemy import desc, select

from belongings.db.models.usage_log import UsageLog
from belongings.db.repositories.base_repository import BaseRepository


class UsageLogRepository(BaseRepository[UsageLog]):

    def __init__(self, session):
        super().__init__(session, UsageLog)

    async def list_for_product(self, product_id: int) -> list[UsageLog]:
        """Most recent usage first."""
        result = await self.session.execute(
            select(UsageLog)
            .where(UsageLog.product_id == product_id)
            .order_by(desc(UsageLog.date), desc(UsageLog.id))
        )
        return list(result.scalars().all())
