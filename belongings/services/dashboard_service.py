"""
Dashboard service - derived metrics for one product or for everything a user owns.
"""

from datetime import date, datetime

from belongings.core.exceptions import persistence_boundary
from belongings.db.repositories.product_repository import ProductRepository
from belongings.db.repositories.usage_log_repository import UsageLogRepository
from belongings.schemas.metrics import DashboardEntry, ProductMetrics
from belongings.services import metrics
from belongings.services.authorization import AuthorizationGuard


class DashboardService:

    def __init__(self, product_repo: ProductRepository, usage_repo: UsageLogRepository):
        self.product_repo = product_repo
        self.usage_repo = usage_repo
        self.guard = AuthorizationGuard(product_repo)

    async def product_metrics(self, user_id: int, product_id: int, reference: date | datetime) -> ProductMetrics:
        with persistence_boundary("Failed to compute product metrics"):
            product = await self.guard.authorize(user_id, product_id)
            logs = await self.usage_repo.list_for_product(product_id)
        return metrics.compute_product_metrics(product, logs, reference)

    async def overview(self, user_id: int, reference: date | datetime) -> list[DashboardEntry]:
        """One entry per owned product, same order as the product list."""
        with persistence_boundary("Failed to build dashboard"):
            products = await self.product_repo.list_for_owner(user_id)
            usage_totals = await self.product_repo.usage_totals_for_owner(user_id)
            incident_counts = await self.product_repo.incident_counts_for_owner(user_id)
        entries = []
        for product in products:
            total = usage_totals.get(product.id, 0)
            warranty_end = metrics.warranty_end_date(product)
            end_of_life = metrics.expected_end_of_life_date(product)
            entries.append(
                DashboardEntry(
                    product_id=product.id,
                    name=product.name,
                    category=product.category,
                    purchase_date=product.purchase_date,
                    warranty_end_date=warranty_end,
                    days_until_warranty_end=metrics.days_until(warranty_end, reference),
                    expected_end_of_life_date=end_of_life,
                    days_until_end_of_life=metrics.days_until(end_of_life, reference),
                    total_usage_minutes=total,
                    usage_progress_percent=metrics.usage_lifespan_progress_percent(product, total),
                    incident_count=incident_counts.get(product.id, 0),
                )
            )
        return entries
