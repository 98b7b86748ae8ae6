"""
Story Repository
동화 데이터 접근 계층 (낭독 상태 조건부 갱신 포함)
"""

import uuid
from datetime import datetime, timedelta
from typing import List

from sqlalchemy import select, update

from ...domain.repositories.base import OwnedRepository
from .models import STARTABLE_AUDIO_STATUSES, AudioStatus, Story


class StoryRepository(OwnedRepository[Story]):
    """
    동화 Repository

    audio_status 전환은 모두 WHERE 조건이 걸린 UPDATE로 처리한다.
    반환값은 실제로 갱신된 행이 있는지 여부.
    """

    model = Story

    async def list_titles_for_user(self, user_id: uuid.UUID) -> List[str]:
        """사용자 동화 제목 목록 (아이디어 중복 회피용)"""
        query = (
            select(Story.title)
            .where(Story.user_id == user_id)
            .order_by(Story.created_at.desc())
        )
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def list_favorites(self, user_id: uuid.UUID) -> List[Story]:
        query = (
            select(Story)
            .where(Story.user_id == user_id, Story.is_favorite.is_(True))
            .order_by(Story.created_at.desc())
        )
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def list_by_child(self, user_id: uuid.UUID, child_id: uuid.UUID) -> List[Story]:
        query = (
            select(Story)
            .where(Story.user_id == user_id, Story.child_id == child_id)
            .order_by(Story.created_at.desc())
        )
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def begin_generation(self, story_id: uuid.UUID) -> bool:
        """
        pending | ready | error → generating

        Returns:
            bool: 전환 성공 여부 (이미 generating이면 False)
        """
        stmt = (
            update(Story)
            .where(
                Story.id == story_id,
                Story.audio_status.in_(STARTABLE_AUDIO_STATUSES),
            )
            .values(
                audio_status=AudioStatus.GENERATING,
                audio_status_updated_at=datetime.utcnow(),
            )
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        return result.rowcount == 1

    async def finalize_ready(self, story_id: uuid.UUID, audio_storage_path: str) -> bool:
        """
        generating → ready (+ 음성 경로)

        Returns:
            bool: 전환 성공 여부 (그 사이 상태가 바뀌었으면 False)
        """
        stmt = (
            update(Story)
            .where(Story.id == story_id, Story.audio_status == AudioStatus.GENERATING)
            .values(
                audio_status=AudioStatus.READY,
                audio_storage_path=audio_storage_path,
                audio_status_updated_at=datetime.utcnow(),
            )
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        return result.rowcount == 1

    async def mark_error(self, story_id: uuid.UUID) -> bool:
        """generating → error"""
        stmt = (
            update(Story)
            .where(Story.id == story_id, Story.audio_status == AudioStatus.GENERATING)
            .values(
                audio_status=AudioStatus.ERROR,
                audio_status_updated_at=datetime.utcnow(),
            )
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        return result.rowcount == 1

    async def sweep_stale_generating(self, max_age: timedelta) -> int:
        """
        max_age보다 오래 generating에 머문 동화를 error로 전환

        Returns:
            int: 전환된 행 수
        """
        cutoff = datetime.utcnow() - max_age
        stmt = (
            update(Story)
            .where(
                Story.audio_status == AudioStatus.GENERATING,
                Story.audio_status_updated_at < cutoff,
            )
            .values(
                audio_status=AudioStatus.ERROR,
                audio_status_updated_at=datetime.utcnow(),
            )
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        return result.rowcount
