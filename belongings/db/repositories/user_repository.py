"""
User repository - lookups used by the identity provider and session resolution.
"""

from sqlalchemy import select

from belongings.db.models.user import User
from belongings.db.repositories.base_repository import BaseRepository


class UserRepository(BaseRepository[User]):

    def __init__(self, session):
        super().__init__(session, User)

    async def get_by_email(self, email: str) -> User | None:
        """Find user by email - used for sign-in."""
        result = await self.session.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()
