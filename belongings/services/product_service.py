"""
Product service - ownership-scoped product use cases.
Every operation on an existing product goes through the authorization guard first.
"""

import logging

from belongings.core.exceptions import NotFound, persistence_boundary
from belongings.db.models.product import Product, utcnow
from belongings.db.repositories.product_repository import ProductRepository
from belongings.schemas.product import ProductCreate, ProductResponse, ProductUpdate
from belongings.services.authorization import AuthorizationGuard
from belongings.services.normalize import (
    MAX_INTEGER,
    normalize_date,
    normalize_decimal,
    normalize_int,
    normalize_text,
    require_text,
)

logger = logging.getLogger(__name__)

NAME_MAX_LENGTH = 255
# Text field -> column length; None is unbounded.
TEXT_FIELDS = {
    "model_number": 255,
    "category": 255,
    "manufacturer": 255,
    "notes": None,
    "image_url": None,
    "manual_url": None,
}
# Integer field -> largest accepted value. Warranty and lifespan stay well
# inside the calendar so the derived end dates are always representable.
INTEGER_FIELDS = {
    "warranty_months": 1200,
    "expected_lifespan_years": 200,
    "expected_usage_hours": MAX_INTEGER,
}


def normalize_product_fields(raw: dict) -> dict:
    """Normalize the optional product fields present in ``raw``; keys not in ``raw`` stay out."""
    values = {}
    for field, value in raw.items():
        if field in TEXT_FIELDS:
            values[field] = normalize_text(value, field, TEXT_FIELDS[field])
        elif field in INTEGER_FIELDS:
            values[field] = normalize_int(value, field, INTEGER_FIELDS[field])
        elif field == "purchase_price":
            values[field] = normalize_decimal(value, field)
        elif field == "purchase_date":
            values[field] = normalize_date(value, field)
    return values


def _product_to_response(product: Product) -> ProductResponse:
    return ProductResponse.model_validate(product)


class ProductService:
    """Create, read, update and delete products on behalf of their owner."""

    def __init__(self, product_repo: ProductRepository):
        self.product_repo = product_repo
        self.guard = AuthorizationGuard(product_repo)

    async def list_products(self, user_id: int) -> list[ProductResponse]:
        with persistence_boundary("Failed to list products"):
            products = await self.product_repo.list_for_owner(user_id)
        return [_product_to_response(p) for p in products]

    async def get(self, user_id: int, product_id: int) -> ProductResponse:
        with persistence_boundary("Failed to load product"):
            product = await self.guard.authorize(user_id, product_id)
        return _product_to_response(product)

    async def create(self, user_id: int, data: ProductCreate) -> ProductResponse:
        """Validate everything first; nothing is written when any field is invalid."""
        raw = data.model_dump()
        name = require_text(raw.pop("name"), "name", NAME_MAX_LENGTH)
        values = normalize_product_fields(raw)
        with persistence_boundary("Failed to create product"):
            now = utcnow()
            product = await self.product_repo.add(
                Product(name=name, owner_id=user_id, created_at=now, updated_at=now, **values)
            )
        logger.info("User %s created product %s", user_id, product.id)
        return _product_to_response(product)

    async def update(self, user_id: int, product_id: int, data: ProductUpdate) -> ProductResponse:
        """Change only the supplied fields; an empty payload only bumps updated_at."""
        supplied = data.supplied()
        with persistence_boundary("Failed to update product"):
            await self.guard.authorize(user_id, product_id)
            values = {}
            if "name" in supplied:
                values["name"] = require_text(supplied.pop("name"), "name", NAME_MAX_LENGTH)
            values.update(normalize_product_fields(supplied))
            values["updated_at"] = utcnow()
            product = await self.product_repo.update_owned(product_id, user_id, values)
        if product is None:
            raise NotFound("Product not found")
        return _product_to_response(product)

    async def delete(self, user_id: int, product_id: int) -> None:
        """Delete the product with its usage logs and incident reports."""
        with persistence_boundary("Failed to delete product"):
            await self.guard.authorize(user_id, product_id)
            deleted = await self.product_repo.delete_owned(product_id, user_id)
        if not deleted:
            raise NotFound("Product not found")
        logger.info("User %s deleted product %s", user_id, product_id)
