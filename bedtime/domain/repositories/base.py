"""
Base Repositories

모든 조회는 AsyncSession 위에서 동작하고, 쓰기는 flush까지만 한다.
commit은 호출한 서비스가 결정한다.
"""

from typing import Generic, List, Optional, Type, TypeVar
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from bedtime.core.database.base import Base

ModelType = TypeVar("ModelType", bound=Base)


class AbstractRepository(Generic[ModelType]):
    model: Type[ModelType]

    def __init__(self, session: AsyncSession, model: Optional[Type[ModelType]] = None):
        self.session = session
        if model is not None:
            self.model = model

    async def get(self, id: UUID) -> Optional[ModelType]:
        """소유자와 무관한 PK 조회. 소유권 판정(404/403)은 서비스의 get_owned가 한다."""
        return await self.session.get(self.model, id)

    async def create(self, **values) -> ModelType:
        instance = self.model(**values)
        self.session.add(instance)
        await self.session.flush()
        await self.session.refresh(instance)
        return instance


class OwnedRepository(AbstractRepository[ModelType]):
    """
    user_id 컬럼을 가진 모델용

    *_for_user 조회는 다른 사용자의 행을 "없음"으로 취급한다.
    """

    def _owned_by(self, user_id: UUID):
        return select(self.model).where(self.model.user_id == user_id)

    async def get_for_user(self, id: UUID, user_id: UUID) -> Optional[ModelType]:
        result = await self.session.execute(self._owned_by(user_id).where(self.model.id == id))
        return result.scalar_one_or_none()

    async def list_for_user(self, user_id: UUID) -> List[ModelType]:
        """최신순"""
        query = self._owned_by(user_id).order_by(self.model.created_at.desc())
        result = await self.session.execute(query)
        return list(result.scalars().all())
