"""
Product CRUD endpoints - thin handlers over ProductService.
Every route requires a session; ownership is enforced inside the service.
"""

from fastapi import APIRouter, Response, status

from belongings.core.dependencies import CurrentUserId
from belongings.db.repositories.product_repository import ProductRepository
from belongings.db.session import DbSession
from belongings.schemas.product import ProductCreate, ProductResponse, ProductUpdate
from belongings.services.product_service import ProductService

router = APIRouter()


def _get_product_service(session: DbSession) -> ProductService:
    return ProductService(ProductRepository(session))


@router.get("", response_model=list[ProductResponse])
async def list_products(session: DbSession, user_id: CurrentUserId):
    """Products of the signed-in user, newest first."""
    return await _get_product_service(session).list_products(user_id)


@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
async def create_product(session: DbSession, data: ProductCreate, user_id: CurrentUserId):
    return await _get_product_service(session).create(user_id, data)


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(session: DbSession, product_id: int, user_id: CurrentUserId):
    return await _get_product_service(session).get(user_id, product_id)


@router.put("/{product_id}", response_model=ProductResponse)
async def update_product(session: DbSession, product_id: int, data: ProductUpdate, user_id: CurrentUserId):
    """Partial update: only fields present in the body change."""
    return await _get_product_service(session).update(user_id, product_id, data)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(session: DbSession, product_id: int, user_id: CurrentUserId):
    """Delete the product together with its usage logs and incident reports."""
    await _get_product_service(session).delete(user_id, product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
