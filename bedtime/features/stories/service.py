"""
Story Service
동화 조회, 즐겨찾기, 낭독 음성 URL
"""

import uuid
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from ...core.auth.context import UserContext
from ...infrastructure.storage.base import AbstractStorageService
from .exceptions import StoryAccessDeniedException, StoryNotFoundException
from .models import AudioStatus, Story
from .repository import StoryRepository


class StoryService:
    """
    동화 조회/관리 서비스

    조회는 소유자가 아니면 None 또는 빈 목록을 반환한다.
    """

    def __init__(
        self,
        story_repo: StoryRepository,
        storage_service: AbstractStorageService,
        db_session: AsyncSession,
    ):
        self.story_repo = story_repo
        self.storage_service = storage_service
        self.db_session = db_session

    async def list_stories(self, ctx: UserContext) -> List[Story]:
        """내 동화 목록 (최신순)"""
        return await self.story_repo.list_for_user(ctx.user_id)

    async def get_story(self, ctx: UserContext, story_id: uuid.UUID) -> Optional[Story]:
        return await self.story_repo.get_for_user(story_id, ctx.user_id)

    async def list_favorites(self, ctx: UserContext) -> List[Story]:
        return await self.story_repo.list_favorites(ctx.user_id)

    async def list_by_child(self, ctx: UserContext, child_id: uuid.UUID) -> List[Story]:
        """
        특정 아이의 동화 목록

        child_id가 다른 사용자의 것이면 user_id 조건에 걸려 빈 목록
        """
        return await self.story_repo.list_by_child(ctx.user_id, child_id)

    async def toggle_favorite(self, ctx: UserContext, story_id: uuid.UUID) -> bool:
        """
        즐겨찾기 토글

        Returns:
            bool: 변경 후 즐겨찾기 여부

        Raises:
            StoryNotFoundException / StoryAccessDeniedException
        """
        story = await self.story_repo.get(story_id)
        if story is None:
            raise StoryNotFoundException(str(story_id))
        if not ctx.owns(story.user_id):
            raise StoryAccessDeniedException(str(story_id))

        story.is_favorite = not story.is_favorite
        await self.db_session.commit()
        return story.is_favorite

    def get_audio_url(self, story: Story) -> Optional[str]:
        """낭독 음성 URL (ready일 때만)"""
        if story.audio_status != AudioStatus.READY:
            return None
        return self.storage_service.get_url(story.audio_storage_path)
