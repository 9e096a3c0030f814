"""
FastAPI dependencies - request-scoped session user resolution.
"""

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from belongings.core.exceptions import Unauthenticated
from belongings.core.security import decode_access_token
from belongings.db.repositories.user_repository import UserRepository
from belongings.db.session import DbSession

security = HTTPBearer(auto_error=False)


async def get_current_user_id(
    session: DbSession,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> int:
    """Resolve the bearer token to a user id. Raises 401 if missing or invalid."""
    if not credentials:
        raise Unauthenticated("Not authenticated")
    payload = decode_access_token(credentials.credentials)
    if not payload or not str(payload.get("sub", "")).isdigit():
        raise Unauthenticated("Invalid or expired token")
    repo = UserRepository(session)
    user = await repo.get_by_id(int(payload["sub"]))
    if not user or not user.is_active:
        raise Unauthenticated("User not found or inactive")
    return user.id


CurrentUserId = Annotated[int, Depends(get_current_user_id)]
