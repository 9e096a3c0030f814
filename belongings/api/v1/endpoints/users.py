"""
User endpoints - the local identity provider: registration, sign-in, current user.
"""

from fastapi import APIRouter, status

from belongings.core.dependencies import CurrentUserId
from belongings.core.exceptions import Conflict, NotFound, Unauthenticated
from belongings.core.security import create_access_token, hash_password, verify_password
from belongings.db.models.user import User
from belongings.db.repositories.user_repository import UserRepository
from belongings.db.session import DbSession
from belongings.schemas.user import LoginRequest, TokenResponse, UserCreate, UserResponse

router = APIRouter()


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def register(session: DbSession, data: UserCreate):
    """Create a new user. Returns the user without password."""
    repo = UserRepository(session)
    if await repo.get_by_email(data.email):
        raise Conflict("Email already registered")
    user = User(
        email=data.email,
        hashed_password=hash_password(data.password),
        name=data.name,
    )
    user = await repo.add(user)
    return UserResponse.model_validate(user)


@router.post("/login", response_model=TokenResponse)
async def login(session: DbSession, data: LoginRequest):
    """Authenticate and return a bearer session token."""
    repo = UserRepository(session)
    user = await repo.get_by_email(data.email)
    if not user or not verify_password(data.password, user.hashed_password):
        raise Unauthenticated("Invalid email or password")
    return TokenResponse(access_token=create_access_token(user.id), user_id=user.id)


@router.get("/me", response_model=UserResponse)
async def me(session: DbSession, user_id: CurrentUserId):
    user = await UserRepository(session).get_by_id(user_id)
    if user is None:
        raise NotFound("User not found")
    return UserResponse.model_validate(user)
