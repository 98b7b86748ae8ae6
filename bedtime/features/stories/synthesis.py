"""
Voice Synthesis Service
동화 낭독 음성 생성 (audio_status 상태 머신)
"""

import base64
import binascii
import logging
import uuid

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ...core.auth.context import UserContext
from ...core.config import settings
from ...core.exceptions import AppException
from ...core.utils.trace import log_process
from ...infrastructure.ai.base import VoiceSpec
from ...infrastructure.ai.exceptions import (
    ProviderAuthenticationException,
    ProviderRequestException,
)
from ...infrastructure.ai.factory import AIProviderFactory
from ...infrastructure.storage.base import AbstractStorageService
from ...infrastructure.storage.exceptions import StorageFailedException
from ..credentials.exceptions import InvalidCredentialException
from ..credentials.models import CredentialKind
from ..credentials.service import CredentialService
from ..voice_presets.service import VoicePresetService
from .exceptions import (
    StoryAccessDeniedException,
    StoryNotFoundException,
    SynthesisFailedException,
    SynthesisInProgressException,
)
from .models import Story
from .repository import StoryRepository

logger = logging.getLogger(__name__)


def story_audio_path(user_id: uuid.UUID, story_id: uuid.UUID) -> str:
    """users/{uid}/stories/{sid}/{uuid}.wav"""
    return f"users/{user_id}/stories/{story_id}/{uuid.uuid4()}.wav"


class VoiceSynthesisService:
    """
    동화 낭독 음성 생성 서비스

    상태 전환:
        pending | ready | error → generating  (조건부 UPDATE 후 즉시 commit)
        generating → ready                    (조건부 UPDATE, 실패 시 업로드 파일 삭제)
        generating → error                    (generating 전환 이후의 모든 실패)

    DI Pattern: 모든 의존성을 생성자를 통해 주입받습니다.
    """

    def __init__(
        self,
        story_repo: StoryRepository,
        preset_service: VoicePresetService,
        credential_service: CredentialService,
        storage_service: AbstractStorageService,
        ai_factory: AIProviderFactory,
        db_session: AsyncSession,
    ):
        self.story_repo = story_repo
        self.preset_service = preset_service
        self.credential_service = credential_service
        self.storage_service = storage_service
        self.ai_factory = ai_factory
        self.db_session = db_session

    async def _load_owned_story(self, ctx: UserContext, story_id: uuid.UUID) -> Story:
        story = await self.story_repo.get(story_id)
        if story is None:
            raise StoryNotFoundException(str(story_id))
        if not ctx.owns(story.user_id):
            raise StoryAccessDeniedException(str(story_id))
        return story

    async def _select_voice(self, ctx: UserContext, story: Story) -> VoiceSpec:
        """
        목소리 우선순위: 보이스 프리셋 > 직접 입력 설명 > 기본 낭독자

        프리셋이 지정돼 있으면 조회 실패 시 대체 음성을 쓰지 않는다.
        """
        if story.voice_preset_id:
            preset = await self.preset_service.get_owned(ctx, story.voice_preset_id)
            return VoiceSpec.saved(preset.provider_voice_id)
        if story.voice_description:
            return VoiceSpec.described(story.voice_description)
        return VoiceSpec.described(settings.fallback_voice_description)

    async def _mark_error(self, story_id: uuid.UUID) -> None:
        try:
            await self.db_session.rollback()
            await self.story_repo.mark_error(story_id)
            await self.db_session.commit()
        except SQLAlchemyError as e:
            # generating으로 남은 동화는 audio_reaper가 error로 정리
            logger.error(f"Failed to mark story {story_id} as error: {e}")

    @log_process(step="Synthesize Story Audio", desc="동화 낭독 음성 생성")
    async def synthesize(self, ctx: UserContext, story_id: uuid.UUID) -> Story:
        """
        Returns:
            Story: audio_status=ready

        Raises:
            StoryNotFoundException / StoryAccessDeniedException
            MissingCredentialException: 음성 API 키 없음 (상태 변경 없음)
            SynthesisInProgressException: 이미 generating
            VoicePresetNotFoundException / VoicePresetAccessDeniedException
            InvalidCredentialException: Provider가 API 키 거부
            SynthesisFailedException: Provider 오류, 타임아웃, 잘못된 오디오
            StorageFailedException: 음성 파일 저장 실패
        """
        story = await self._load_owned_story(ctx, story_id)
        previous_path = story.audio_storage_path
        api_key = await self.credential_service.require_credential(
            ctx, CredentialKind.SPEECH
        )

        started = await self.story_repo.begin_generation(story_id)
        await self.db_session.commit()
        if not started:
            raise SynthesisInProgressException(str(story_id))

        try:
            path = await self._generate_and_store(ctx, story, api_key)
        except AppException:
            await self._mark_error(story_id)
            raise
        except Exception as e:
            await self._mark_error(story_id)
            raise SynthesisFailedException(str(story_id), reason=str(e)) from e

        # 재합성이면 이전 낭독 파일은 더 이상 참조되지 않음
        if previous_path and previous_path != path:
            await self._discard_blob(previous_path)

        await self.db_session.refresh(story)
        logger.info(f"Story audio ready: {story_id} -> {story.audio_storage_path}")
        return story

    async def _generate_and_store(
        self, ctx: UserContext, story: Story, api_key: str
    ) -> str:
        voice = await self._select_voice(ctx, story)
        provider = self.ai_factory.get_speech_provider(api_key)

        try:
            result = await provider.synthesize(story.content, voice)
        except ProviderAuthenticationException as e:
            raise InvalidCredentialException(CredentialKind.SPEECH, reason=str(e))
        except ProviderRequestException as e:
            raise SynthesisFailedException(str(story.id), reason=e.reason)

        try:
            audio = base64.b64decode(result.audio_base64, validate=True)
        except (binascii.Error, ValueError) as e:
            raise SynthesisFailedException(str(story.id), reason=f"invalid audio payload: {e}")
        if not audio:
            raise SynthesisFailedException(str(story.id), reason="empty audio payload")

        path = story_audio_path(ctx.user_id, story.id)
        try:
            path = await self.storage_service.save(audio, path, content_type="audio/wav")
        except Exception as e:
            raise StorageFailedException(path=path, reason=str(e))

        try:
            finalized = await self.story_repo.finalize_ready(story.id, path)
            await self.db_session.commit()
        except Exception:
            await self._discard_blob(path)
            raise
        if not finalized:
            # 합성 도중 상태가 바뀜 (audio_reaper 등)
            await self._discard_blob(path)
            raise SynthesisFailedException(
                str(story.id), reason="audio status changed during synthesis"
            )
        return path

    async def _discard_blob(self, path: str) -> None:
        try:
            await self.storage_service.delete(path)
        except Exception as e:
            logger.warning(f"Failed to delete discarded audio {path}: {e}")
