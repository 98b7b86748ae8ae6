"""
VoicePresetProvisioningService 단위 테스트
"""

import uuid
from unittest.mock import AsyncMock

import pytest
from sqlalchemy.exc import OperationalError

from bedtime.core.config import settings
from bedtime.features.credentials.exceptions import (
    InvalidCredentialException,
    MissingCredentialException,
)
from bedtime.features.voice_presets.exceptions import (
    VoicePresetAccessDeniedException,
    VoicePresetCreationFailedException,
    VoicePresetNotFoundException,
    VoicePresetSaveFailedException,
)
from bedtime.features.voice_presets.provisioning import VoicePresetProvisioningService
from bedtime.features.voice_presets.repository import VoicePresetRepository
from bedtime.infrastructure.ai.base import RegisteredVoice, VoiceSpec
from bedtime.infrastructure.ai.exceptions import (
    DuplicateVoiceNameException,
    ProviderAuthenticationException,
    ProviderRequestException,
)
from bedtime.infrastructure.storage.exceptions import StorageFailedException


@pytest.fixture
def preset_repo(db_session):
    return VoicePresetRepository(db_session)


@pytest.fixture
def provisioning_service(
    preset_repo,
    preset_service,
    credential_service,
    mock_storage_service,
    mock_ai_factory,
    db_session,
):
    return VoicePresetProvisioningService(
        preset_repo=preset_repo,
        preset_service=preset_service,
        credential_service=credential_service,
        storage_service=mock_storage_service,
        ai_factory=mock_ai_factory,
        db_session=db_session,
    )


class TestCreatePreset:
    async def test_create(
        self,
        ctx,
        with_speech_key,
        provisioning_service,
        preset_service,
        mock_speech_provider,
        mock_storage_service,
    ):
        preset = await provisioning_service.create_preset(
            ctx, "Grandma", "A warm, slow grandmother voice"
        )

        text, voice = mock_speech_provider.synthesize.call_args.args
        assert text == settings.voice_sample_text
        assert voice == VoiceSpec.described("A warm, slow grandmother voice")
        mock_speech_provider.register_voice.assert_awaited_once_with("Grandma", "gen-123")

        assert preset.user_id == ctx.user_id
        assert preset.provider_voice_id == "voice-Grandma"
        assert preset.provider_voice_name == "Grandma"
        assert preset.sample_audio_path.startswith(f"users/{ctx.user_id}/voice_presets/")
        assert mock_storage_service.save.call_args.kwargs["content_type"] == "audio/wav"

        assert [p.id for p in await preset_service.list(ctx)] == [preset.id]

    async def test_duplicate_name_stores_nothing(
        self,
        ctx,
        with_speech_key,
        provisioning_service,
        preset_service,
        mock_speech_provider,
        mock_storage_service,
    ):
        mock_speech_provider.register_voice.side_effect = DuplicateVoiceNameException("Grandma")

        with pytest.raises(DuplicateVoiceNameException) as exc_info:
            await provisioning_service.create_preset(ctx, "Grandma", "warm")

        assert exc_info.value.status_code == 409
        mock_storage_service.save.assert_not_called()
        assert await preset_service.list(ctx) == []

    async def test_missing_credential(self, ctx, provisioning_service, mock_speech_provider):
        with pytest.raises(MissingCredentialException):
            await provisioning_service.create_preset(ctx, "Grandma", "warm")

        mock_speech_provider.synthesize.assert_not_called()

    async def test_rejected_key(
        self, ctx, with_speech_key, provisioning_service, mock_speech_provider
    ):
        mock_speech_provider.synthesize.side_effect = ProviderAuthenticationException("Hume")

        with pytest.raises(InvalidCredentialException):
            await provisioning_service.create_preset(ctx, "Grandma", "warm")

    async def test_provider_failure(
        self, ctx, with_speech_key, provisioning_service, mock_speech_provider
    ):
        mock_speech_provider.register_voice.side_effect = ProviderRequestException(
            "Hume", reason="HTTP 500"
        )

        with pytest.raises(VoicePresetCreationFailedException):
            await provisioning_service.create_preset(ctx, "Grandma", "warm")

    async def test_storage_failure(
        self, ctx, with_speech_key, provisioning_service, preset_service, mock_storage_service
    ):
        mock_storage_service.save.side_effect = OSError("disk full")

        with pytest.raises(StorageFailedException):
            await provisioning_service.create_preset(ctx, "Grandma", "warm")

        assert await preset_service.list(ctx) == []

    async def test_save_failure(
        self, ctx, with_speech_key, provisioning_service, preset_repo
    ):
        preset_repo.create = AsyncMock(
            side_effect=OperationalError("INSERT INTO voice_presets", {}, Exception("locked"))
        )

        with pytest.raises(VoicePresetSaveFailedException):
            await provisioning_service.create_preset(ctx, "Grandma", "warm")


class TestDeletePreset:
    async def test_delete(
        self,
        ctx,
        preset,
        with_speech_key,
        provisioning_service,
        preset_service,
        mock_speech_provider,
        mock_storage_service,
    ):
        sample_path = preset.sample_audio_path

        await provisioning_service.delete_preset(ctx, preset.id)

        mock_speech_provider.delete_voice.assert_awaited_once_with(
            RegisteredVoice(id="voice-Grandma", name="Grandma")
        )
        mock_storage_service.delete.assert_awaited_once_with(sample_path)
        assert await preset_service.list(ctx) == []

    async def test_uses_original_provider_name_after_rename(
        self, ctx, preset, with_speech_key, provisioning_service, preset_service, mock_speech_provider
    ):
        await preset_service.update(ctx, preset.id, name="Nana")

        await provisioning_service.delete_preset(ctx, preset.id)

        voice = mock_speech_provider.delete_voice.call_args.args[0]
        assert voice.name == "Grandma"

    async def test_provider_failure_still_deletes(
        self, ctx, preset, with_speech_key, provisioning_service, preset_service, mock_speech_provider
    ):
        mock_speech_provider.delete_voice.side_effect = ProviderRequestException(
            "Hume", reason="HTTP 404"
        )

        await provisioning_service.delete_preset(ctx, preset.id)

        assert await preset_service.list(ctx) == []

    async def test_without_credential_still_deletes(
        self, ctx, preset, provisioning_service, preset_service, mock_speech_provider
    ):
        await provisioning_service.delete_preset(ctx, preset.id)

        mock_speech_provider.delete_voice.assert_not_called()
        assert await preset_service.list(ctx) == []

    async def test_storage_error_keeps_row(
        self, ctx, preset, with_speech_key, provisioning_service, preset_service, mock_storage_service
    ):
        mock_storage_service.delete.side_effect = OSError("permission denied")

        with pytest.raises(StorageFailedException):
            await provisioning_service.delete_preset(ctx, preset.id)

        assert await preset_service.get(ctx, preset.id) is not None

    async def test_missing_sample_still_deletes(
        self, ctx, preset, with_speech_key, provisioning_service, preset_service, mock_storage_service
    ):
        mock_storage_service.delete.return_value = False

        await provisioning_service.delete_preset(ctx, preset.id)

        assert await preset_service.list(ctx) == []

    async def test_foreign_preset(self, ctx, other_ctx, preset, provisioning_service):
        with pytest.raises(VoicePresetAccessDeniedException):
            await provisioning_service.delete_preset(other_ctx, preset.id)

    async def test_missing_preset(self, ctx, provisioning_service):
        with pytest.raises(VoicePresetNotFoundException):
            await provisioning_service.delete_preset(ctx, uuid.uuid4())
