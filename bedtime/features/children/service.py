"""
Child Profile Service
아이 프로필 CRUD
"""

import logging
import uuid
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from ...core.auth.context import UserContext
from .exceptions import ChildAccessDeniedException, ChildNotFoundException
from .models import ChildProfile
from .repository import ChildProfileRepository

logger = logging.getLogger(__name__)


class ChildProfileService:
    """
    아이 프로필 서비스

    조회는 소유자가 아니면 None, 수정/삭제는 NotFound / AccessDenied
    """

    def __init__(self, child_repo: ChildProfileRepository, db_session: AsyncSession):
        self.child_repo = child_repo
        self.db_session = db_session

    async def create(
        self, ctx: UserContext, name: str, age: int, interests: str = ""
    ) -> ChildProfile:
        """아이 프로필 생성"""
        child = await self.child_repo.create(
            user_id=ctx.user_id, name=name, age=age, interests=interests
        )
        await self.db_session.commit()
        logger.info(f"Child profile created: {child.id} (user={ctx.user_id})")
        return child

    async def list(self, ctx: UserContext) -> List[ChildProfile]:
        """내 아이 프로필 목록 (최신순)"""
        return await self.child_repo.list_for_user(ctx.user_id)

    async def get(self, ctx: UserContext, child_id: uuid.UUID) -> Optional[ChildProfile]:
        """단일 조회 (없거나 다른 사용자 소유면 None)"""
        return await self.child_repo.get_for_user(child_id, ctx.user_id)

    async def get_owned(self, ctx: UserContext, child_id: uuid.UUID) -> ChildProfile:
        """
        소유권 검사 포함 조회

        Raises:
            ChildNotFoundException: 프로필 없음
            ChildAccessDeniedException: 다른 사용자의 프로필
        """
        child = await self.child_repo.get(child_id)
        if child is None:
            raise ChildNotFoundException(str(child_id))
        if not ctx.owns(child.user_id):
            raise ChildAccessDeniedException(str(child_id))
        return child

    async def update(
        self,
        ctx: UserContext,
        child_id: uuid.UUID,
        name: Optional[str] = None,
        age: Optional[int] = None,
        interests: Optional[str] = None,
    ) -> ChildProfile:
        """아이 프로필 수정 (None인 필드는 유지)"""
        child = await self.get_owned(ctx, child_id)

        if name is not None:
            child.name = name
        if age is not None:
            child.age = age
        if interests is not None:
            child.interests = interests

        await self.db_session.commit()
        await self.db_session.refresh(child)
        return child

    async def delete(self, ctx: UserContext, child_id: uuid.UUID) -> None:
        """아이 프로필 삭제 (이 프로필로 만든 동화는 유지)"""
        child = await self.get_owned(ctx, child_id)
        await self.db_session.delete(child)
        await self.db_session.commit()
        logger.info(f"Child profile deleted: {child_id} (user={ctx.user_id})")
