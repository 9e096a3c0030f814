"""
Authorization guard - the single ownership check in front of every product operation.

An absent product is NotFound (404); a product owned by someone else is
Forbidden (403). The same split applies to every entry point, including the
usage log and incident report operations, which are scoped to their product.
"""

import logging

from belongings.core.exceptions import Forbidden, NotFound
from belongings.db.models.product import Product
from belongings.db.repositories.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class AuthorizationGuard:

    def __init__(self, product_repo: ProductRepository):
        self.product_repo = product_repo

    async def authorize(self, user_id: int, product_id: int) -> Product:
        """Return the product when ``user_id`` owns it, so callers need no second lookup."""
        product = await self.product_repo.get_by_id(product_id)
        if product is None:
            raise NotFound("Product not found")
        if product.owner_id != user_id:
            logger.warning("User %s denied access to product %s", user_id, product_id)
            raise Forbidden("You do not have access to this product")
        return product
