"""
Product repository - owner-scoped queries and writes.
Update and delete statements always carry the owner in their WHERE clause.
"""

from typing import Any

from sqlalchemy import delete, desc, func, select, update

from belongings.db.models.incident_report import IncidentReport
from belongings.db.models.product import Product
from belongings.db.models.usage_log import UsageLog
from belongings.db.repositories.base_repository import BaseRepository


class ProductRepository(BaseRepository[Product]):

    def __init__(self, session):
        super().__init__(session, Product)

    async def list_for_owner(self, owner_id: int) -> list[Product]:
        """Products of one owner, newest first."""
        result = await self.session.execute(
            select(Product)
            .where(Product.owner_id == owner_id)
            .order_by(desc(Product.created_at), desc(Product.id))
        )
        return list(result.scalars().all())

    async def update_owned(self, product_id: int, owner_id: int, values: dict[str, Any]) -> Product | None:
        """Apply column values to a product of this owner. Returns None if no row matched."""
        result = await self.session.execute(
            update(Product)
            .where(Product.id == product_id, Product.owner_id == owner_id)
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            return None
        product = await self.get_by_id(product_id)
        if product is not None:
            await self.session.refresh(product)
        return product

    async def delete_owned(self, product_id: int, owner_id: int) -> bool:
        """
        Delete a product of this owner together with its usage logs and incident reports.
        Children go first so no orphan survives even where ON DELETE CASCADE is not enforced.
        """
        owned = select(Product.id).where(Product.id == product_id, Product.owner_id == owner_id)
        await self.session.execute(
            delete(UsageLog).where(UsageLog.product_id.in_(owned)).execution_options(synchronize_session=False)
        )
        await self.session.execute(
            delete(IncidentReport)
            .where(IncidentReport.product_id.in_(owned))
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(
            delete(Product)
            .where(Product.id == product_id, Product.owner_id == owner_id)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount > 0

    async def usage_totals_for_owner(self, owner_id: int) -> dict[int, int]:
        """Sum of logged minutes per product for every product of one owner."""
        result = await self.session.execute(
            select(UsageLog.product_id, func.coalesce(func.sum(UsageLog.duration), 0))
            .join(Product, Product.id == UsageLog.product_id)
            .where(Product.owner_id == owner_id)
            .group_by(UsageLog.product_id)
        )
        return {product_id: int(total) for product_id, total in result.all()}

    async def incident_counts_for_owner(self, owner_id: int) -> dict[int, int]:
        result = await self.session.execute(
            select(IncidentReport.product_id, func.count(IncidentReport.id))
            .join(Product, Product.id == IncidentReport.product_id)
            .where(Product.owner_id == owner_id)
            .group_by(IncidentReport.product_id)
        )
        return {product_id: int(count) for product_id, count in result.all()}
