"""
User Repository
"""

from typing import Optional

from sqlalchemy import select

from ...domain.models.user import User
from ...domain.repositories.base import AbstractRepository


class UserRepository(AbstractRepository[User]):
    model = User

    async def get_by_email(self, email: str) -> Optional[User]:
        """email은 AuthService가 소문자로 정규화한 값"""
        result = await self.session.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()
