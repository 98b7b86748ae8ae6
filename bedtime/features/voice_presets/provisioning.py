"""
Voice Preset Provisioning Service
샘플 합성 → Provider 음성 등록 → 샘플 저장 → DB 저장
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
from ...infrastructure.ai.base import RegisteredVoice, VoiceSpec
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
from .exceptions import (
    VoicePresetCreationFailedException,
    VoicePresetSaveFailedException,
)
from .models import VoicePreset
from .repository import VoicePresetRepository
from .service import VoicePresetService

logger = logging.getLogger(__name__)


def sample_audio_path(user_id: uuid.UUID) -> str:
    """users/{uid}/voice_presets/{uuid}.wav"""
    return f"users/{user_id}/voice_presets/{uuid.uuid4()}.wav"


class VoicePresetProvisioningService:
    """
    보이스 프리셋 생성/삭제

    DI Pattern: 모든 의존성을 생성자를 통해 주입받습니다.
    """

    def __init__(
        self,
        preset_repo: VoicePresetRepository,
        preset_service: VoicePresetService,
        credential_service: CredentialService,
        storage_service: AbstractStorageService,
        ai_factory: AIProviderFactory,
        db_session: AsyncSession,
    ):
        self.preset_repo = preset_repo
        self.preset_service = preset_service
        self.credential_service = credential_service
        self.storage_service = storage_service
        self.ai_factory = ai_factory
        self.db_session = db_session

    @log_process(step="Create Voice Preset", desc="보이스 프리셋 생성")
    async def create_preset(
        self, ctx: UserContext, name: str, description: str
    ) -> VoicePreset:
        """
        보이스 프리셋 생성

        1. 음성 API 키 확인
        2. 고정 샘플 문장을 description 음성으로 합성
        3. generation_id를 name으로 Provider에 등록
        4. 샘플 음성 저장
        5. DB 저장

        Raises:
            MissingCredentialException: 음성 API 키 없음
            InvalidCredentialException: Provider가 API 키 거부
            DuplicateVoiceNameException: Provider에 같은 이름 존재 (아무것도 저장하지 않음)
            VoicePresetCreationFailedException: 합성/등록 실패
            StorageFailedException: 샘플 저장 실패
            VoicePresetSaveFailedException: DB 저장 실패
        """
        api_key = await self.credential_service.require_credential(
            ctx, CredentialKind.SPEECH
        )
        provider = self.ai_factory.get_speech_provider(api_key)

        try:
            sample = await provider.synthesize(
                settings.voice_sample_text, VoiceSpec.described(description)
            )
            audio = base64.b64decode(sample.audio_base64, validate=True)
            registered = await provider.register_voice(name, sample.generation_id)
        except ProviderAuthenticationException as e:
            raise InvalidCredentialException(CredentialKind.SPEECH, reason=str(e))
        except ProviderRequestException as e:
            raise VoicePresetCreationFailedException(reason=e.reason)
        except (binascii.Error, ValueError) as e:
            raise VoicePresetCreationFailedException(reason=f"invalid sample audio: {e}")

        path = sample_audio_path(ctx.user_id)
        try:
            path = await self.storage_service.save(audio, path, content_type="audio/wav")
        except Exception as e:
            logger.error(
                f"Sample upload failed, provider voice orphaned: {registered.name}",
                extra={"user_id": str(ctx.user_id), "provider_voice_id": registered.id},
            )
            raise StorageFailedException(path=path, reason=str(e))

        try:
            preset = await self.preset_repo.create(
                user_id=ctx.user_id,
                name=name,
                description=description,
                provider_voice_id=registered.id,
                provider_voice_name=registered.name,
                sample_audio_path=path,
            )
            await self.db_session.commit()
        except SQLAlchemyError as e:
            await self.db_session.rollback()
            # Provider 음성과 샘플 파일은 남는다
            logger.error(
                f"Voice preset save failed, provider voice orphaned: {registered.name}",
                extra={
                    "user_id": str(ctx.user_id),
                    "provider_voice_id": registered.id,
                    "sample_audio_path": path,
                },
            )
            raise VoicePresetSaveFailedException(reason=str(e))

        logger.info(f"Voice preset created: {preset.id} (provider voice {registered.id})")
        return preset

    @log_process(step="Delete Voice Preset", desc="보이스 프리셋 삭제")
    async def delete_preset(self, ctx: UserContext, preset_id: uuid.UUID) -> None:
        """
        보이스 프리셋 삭제

        1. 소유권 검사
        2. Provider 음성 삭제 (실패해도 경고만 남기고 진행)
        3. 샘플 파일 삭제 (저장소 오류면 중단, DB 행 유지)
        4. DB 행 삭제

        Raises:
            VoicePresetNotFoundException / VoicePresetAccessDeniedException
            StorageFailedException: 샘플 파일 삭제 실패
        """
        preset = await self.preset_service.get_owned(ctx, preset_id)

        await self._delete_provider_voice(ctx, preset)

        try:
            deleted = await self.storage_service.delete(preset.sample_audio_path)
        except Exception as e:
            raise StorageFailedException(path=preset.sample_audio_path, reason=str(e))
        if not deleted:
            logger.warning(f"Sample audio already missing: {preset.sample_audio_path}")

        await self.db_session.delete(preset)
        await self.db_session.commit()

    async def _delete_provider_voice(self, ctx: UserContext, preset: VoicePreset) -> None:
        """Provider 음성 삭제 (best-effort)"""
        try:
            api_key = await self.credential_service.get_credential(
                ctx, CredentialKind.SPEECH
            )
            if not api_key:
                logger.warning(
                    f"Skipping provider voice delete, no speech credential: {preset.provider_voice_name}"
                )
                return

            provider = self.ai_factory.get_speech_provider(api_key)
            await provider.delete_voice(
                RegisteredVoice(id=preset.provider_voice_id, name=preset.provider_voice_name)
            )
        except AppException as e:
            logger.warning(
                f"Provider voice delete failed: {preset.provider_voice_name} ({e})",
                extra={"voice_preset_id": str(preset.id)},
            )
