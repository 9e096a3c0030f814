"""
API v1 router - aggregates all endpoint modules.
"""

from fastapi import APIRouter

from belongings.api.v1.endpoints import dashboard, health, incidents, products, usage_logs, users

api_router = APIRouter(prefix="/v1")

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(users.router, prefix="/users", tags=["users"])
api_router.include_router(products.router, prefix="/products", tags=["products"])
api_router.include_router(usage_logs.router, prefix="/products", tags=["usage"])
api_router.include_router(incidents.router, prefix="/products", tags=["incidents"])
api_router.include_router(dashboard.router)
