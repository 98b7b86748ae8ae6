"""
Voice Preset Service
보이스 프리셋 조회/수정 (생성/삭제는 provisioning 모듈)
"""

import uuid
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from ...core.auth.context import UserContext
from ...infrastructure.storage.base import AbstractStorageService
from .exceptions import VoicePresetAccessDeniedException, VoicePresetNotFoundException
from .models import VoicePreset
from .repository import VoicePresetRepository


class VoicePresetService:
    """보이스 프리셋 조회/수정 서비스"""

    def __init__(
        self,
        preset_repo: VoicePresetRepository,
        storage_service: AbstractStorageService,
        db_session: AsyncSession,
    ):
        self.preset_repo = preset_repo
        self.storage_service = storage_service
        self.db_session = db_session

    async def list(self, ctx: UserContext) -> List[VoicePreset]:
        """내 보이스 프리셋 목록 (최신순)"""
        return await self.preset_repo.list_for_user(ctx.user_id)

    async def get(self, ctx: UserContext, preset_id: uuid.UUID) -> Optional[VoicePreset]:
        """단일 조회 (없거나 다른 사용자 소유면 None)"""
        return await self.preset_repo.get_for_user(preset_id, ctx.user_id)

    async def get_owned(self, ctx: UserContext, preset_id: uuid.UUID) -> VoicePreset:
        """
        소유권 검사 포함 조회

        Raises:
            VoicePresetNotFoundException: 프리셋 없음
            VoicePresetAccessDeniedException: 다른 사용자의 프리셋
        """
        preset = await self.preset_repo.get(preset_id)
        if preset is None:
            raise VoicePresetNotFoundException(str(preset_id))
        if not ctx.owns(preset.user_id):
            raise VoicePresetAccessDeniedException(str(preset_id))
        return preset

    async def update(
        self,
        ctx: UserContext,
        preset_id: uuid.UUID,
        name: Optional[str] = None,
        description: Optional[str] = None,
    ) -> VoicePreset:
        """
        로컬 이름/설명 수정

        Provider 음성(provider_voice_id / provider_voice_name)은 바뀌지 않는다.
        """
        preset = await self.get_owned(ctx, preset_id)

        if name is not None:
            preset.name = name
        if description is not None:
            preset.description = description

        await self.db_session.commit()
        await self.db_session.refresh(preset)
        return preset

    def get_sample_url(self, preset: VoicePreset) -> Optional[str]:
        """샘플 음성 접근 URL"""
        return self.storage_service.get_url(preset.sample_audio_path)
