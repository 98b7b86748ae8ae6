"""
VoiceSynthesisService 단위 테스트
audio_status 상태 머신 / 목소리 우선순위 / 실패 처리
"""

import base64
import uuid
from unittest.mock import AsyncMock

import pytest
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from bedtime.core.config import settings
from bedtime.features.credentials.exceptions import (
    InvalidCredentialException,
    MissingCredentialException,
)
from bedtime.features.stories.exceptions import (
    StoryAccessDeniedException,
    StoryNotFoundException,
    SynthesisFailedException,
    SynthesisInProgressException,
)
from bedtime.features.stories.models import AudioStatus, Story
from bedtime.features.stories.synthesis import VoiceSynthesisService
from bedtime.features.voice_presets.exceptions import VoicePresetNotFoundException
from bedtime.infrastructure.ai.base import SynthesisResult, VoiceSpec
from bedtime.infrastructure.ai.exceptions import (
    ProviderAuthenticationException,
    ProviderRequestException,
)
from bedtime.infrastructure.storage.exceptions import StorageFailedException


@pytest.fixture
def synthesis_service(
    story_repo,
    preset_service,
    credential_service,
    mock_storage_service,
    mock_ai_factory,
    db_session,
):
    return VoiceSynthesisService(
        story_repo=story_repo,
        preset_service=preset_service,
        credential_service=credential_service,
        storage_service=mock_storage_service,
        ai_factory=mock_ai_factory,
        db_session=db_session,
    )


async def reload_status(db_session, story):
    await db_session.refresh(story)
    return story.audio_status


class TestSynthesizeHappyPath:
    async def test_pending_to_ready(
        self,
        ctx,
        with_speech_key,
        make_story,
        synthesis_service,
        mock_ai_factory,
        mock_speech_provider,
        mock_storage_service,
    ):
        story = await make_story()

        result = await synthesis_service.synthesize(ctx, story.id)

        assert result.audio_status == AudioStatus.READY
        prefix = f"users/{ctx.user_id}/stories/{story.id}/"
        assert result.audio_storage_path.startswith(prefix)
        assert result.audio_storage_path.endswith(".wav")

        mock_ai_factory.get_speech_provider.assert_called_once_with("hume-key")
        text, voice = mock_speech_provider.synthesize.call_args.args
        assert text == story.content
        assert voice == VoiceSpec.described("A calm, warm narrator")

        audio, path = mock_storage_service.save.call_args.args
        expected = mock_speech_provider.synthesize.return_value.audio_base64
        assert audio == base64.b64decode(expected)
        assert path == result.audio_storage_path
        assert mock_storage_service.save.call_args.kwargs["content_type"] == "audio/wav"

    async def test_preset_voice_wins(
        self, ctx, preset, with_speech_key, make_story, synthesis_service, mock_speech_provider
    ):
        story = await make_story(
            voice_preset_id=preset.id,
            voice_name=preset.name,
            voice_description="ignored when a preset is set",
        )

        await synthesis_service.synthesize(ctx, story.id)

        voice = mock_speech_provider.synthesize.call_args.args[1]
        assert voice == VoiceSpec.saved("voice-Grandma")

    async def test_fallback_narrator(
        self, ctx, with_speech_key, make_story, synthesis_service, mock_speech_provider
    ):
        story = await make_story(voice_description=None)

        await synthesis_service.synthesize(ctx, story.id)

        voice = mock_speech_provider.synthesize.call_args.args[1]
        assert voice == VoiceSpec.described(settings.fallback_voice_description)

    async def test_retry_from_error(
        self, ctx, with_speech_key, make_story, synthesis_service
    ):
        story = await make_story(audio_status=AudioStatus.ERROR)

        result = await synthesis_service.synthesize(ctx, story.id)

        assert result.audio_status == AudioStatus.READY

    async def test_regenerate_from_ready(
        self, ctx, with_speech_key, make_story, synthesis_service, mock_storage_service
    ):
        story = await make_story(
            audio_status=AudioStatus.READY,
            audio_storage_path=f"users/{ctx.user_id}/stories/old.wav",
        )

        result = await synthesis_service.synthesize(ctx, story.id)

        assert result.audio_status == AudioStatus.READY
        assert result.audio_storage_path != f"users/{ctx.user_id}/stories/old.wav"
        # 새 파일로 교체된 뒤 이전 낭독 파일 삭제
        mock_storage_service.delete.assert_awaited_once_with(
            f"users/{ctx.user_id}/stories/old.wav"
        )

    async def test_first_synthesis_deletes_nothing(
        self, ctx, with_speech_key, make_story, synthesis_service, mock_storage_service
    ):
        story = await make_story()

        await synthesis_service.synthesize(ctx, story.id)

        mock_storage_service.delete.assert_not_called()

    async def test_generating_visible_to_other_sessions_during_provider_call(
        self,
        ctx,
        with_speech_key,
        make_story,
        synthesis_service,
        session_factory,
        mock_speech_provider,
    ):
        story = await make_story()
        observed = []

        async def synthesize_and_observe(text, voice):
            async with session_factory() as other:
                status = await other.scalar(
                    select(Story.audio_status).where(Story.id == story.id)
                )
            observed.append(status)
            return SynthesisResult(
                audio_base64=base64.b64encode(b"RIFF narration").decode("ascii"),
                generation_id="gen-observe",
            )

        mock_speech_provider.synthesize.side_effect = synthesize_and_observe

        result = await synthesis_service.synthesize(ctx, story.id)

        assert observed == [AudioStatus.GENERATING]
        assert result.audio_status == AudioStatus.READY


class TestSynthesizeRejected:
    async def test_story_not_found(self, ctx, with_speech_key, synthesis_service):
        with pytest.raises(StoryNotFoundException):
            await synthesis_service.synthesize(ctx, uuid.uuid4())

    async def test_foreign_story(
        self, ctx, other_ctx, make_story, synthesis_service, db_session, mock_speech_provider
    ):
        story = await make_story(owner=other_ctx)

        with pytest.raises(StoryAccessDeniedException):
            await synthesis_service.synthesize(ctx, story.id)

        assert await reload_status(db_session, story) == AudioStatus.PENDING
        mock_speech_provider.synthesize.assert_not_called()

    async def test_missing_credential_leaves_status(
        self, ctx, make_story, synthesis_service, db_session, mock_speech_provider
    ):
        story = await make_story()

        with pytest.raises(MissingCredentialException):
            await synthesis_service.synthesize(ctx, story.id)

        assert await reload_status(db_session, story) == AudioStatus.PENDING
        mock_speech_provider.synthesize.assert_not_called()

    async def test_already_generating(
        self, ctx, with_speech_key, make_story, synthesis_service, db_session, mock_speech_provider
    ):
        story = await make_story(audio_status=AudioStatus.GENERATING)

        with pytest.raises(SynthesisInProgressException) as exc_info:
            await synthesis_service.synthesize(ctx, story.id)

        assert exc_info.value.status_code == 409
        assert await reload_status(db_session, story) == AudioStatus.GENERATING
        mock_speech_provider.synthesize.assert_not_called()


class TestSynthesizeFailures:
    async def test_provider_failure_marks_error(
        self, ctx, with_speech_key, make_story, synthesis_service, db_session, mock_speech_provider
    ):
        story = await make_story()
        mock_speech_provider.synthesize.side_effect = ProviderRequestException(
            "Hume", reason="HTTP 500"
        )

        with pytest.raises(SynthesisFailedException):
            await synthesis_service.synthesize(ctx, story.id)

        assert await reload_status(db_session, story) == AudioStatus.ERROR
        assert story.audio_storage_path is None

    async def test_rejected_key_marks_error(
        self, ctx, with_speech_key, make_story, synthesis_service, db_session, mock_speech_provider
    ):
        story = await make_story()
        mock_speech_provider.synthesize.side_effect = ProviderAuthenticationException("Hume")

        with pytest.raises(InvalidCredentialException):
            await synthesis_service.synthesize(ctx, story.id)

        assert await reload_status(db_session, story) == AudioStatus.ERROR

    async def test_invalid_audio_payload(
        self, ctx, with_speech_key, make_story, synthesis_service, db_session, mock_speech_provider, mock_storage_service
    ):
        story = await make_story()
        mock_speech_provider.synthesize.return_value = SynthesisResult(
            audio_base64="not base64!!", generation_id="gen-1"
        )

        with pytest.raises(SynthesisFailedException):
            await synthesis_service.synthesize(ctx, story.id)

        assert await reload_status(db_session, story) == AudioStatus.ERROR
        mock_storage_service.save.assert_not_called()

    async def test_storage_failure_marks_error(
        self, ctx, with_speech_key, make_story, synthesis_service, db_session, mock_storage_service
    ):
        story = await make_story()
        mock_storage_service.save.side_effect = OSError("disk full")

        with pytest.raises(StorageFailedException):
            await synthesis_service.synthesize(ctx, story.id)

        assert await reload_status(db_session, story) == AudioStatus.ERROR

    async def test_deleted_preset_no_fallback(
        self, ctx, with_speech_key, make_story, synthesis_service, db_session, mock_speech_provider
    ):
        story = await make_story(voice_preset_id=uuid.uuid4(), voice_name="Gone")

        with pytest.raises(VoicePresetNotFoundException):
            await synthesis_service.synthesize(ctx, story.id)

        assert await reload_status(db_session, story) == AudioStatus.ERROR
        mock_speech_provider.synthesize.assert_not_called()

    async def test_lost_finalize_discards_audio(
        self,
        ctx,
        with_speech_key,
        make_story,
        synthesis_service,
        story_repo,
        db_session,
        mock_storage_service,
    ):
        story = await make_story()
        # 합성 도중 다른 경로(audio_reaper 등)가 상태를 바꾼 경우
        story_repo.finalize_ready = AsyncMock(return_value=False)

        with pytest.raises(SynthesisFailedException):
            await synthesis_service.synthesize(ctx, story.id)

        saved_path = mock_storage_service.save.call_args.args[1]
        mock_storage_service.delete.assert_awaited_once_with(saved_path)
        await db_session.refresh(story)
        assert story.audio_status == AudioStatus.ERROR
        assert story.audio_storage_path is None

    async def test_finalize_db_error_discards_audio(
        self,
        ctx,
        with_speech_key,
        make_story,
        synthesis_service,
        story_repo,
        db_session,
        mock_storage_service,
    ):
        story = await make_story()
        story_repo.finalize_ready = AsyncMock(side_effect=SQLAlchemyError("connection lost"))

        with pytest.raises(SynthesisFailedException):
            await synthesis_service.synthesize(ctx, story.id)

        saved_path = mock_storage_service.save.call_args.args[1]
        mock_storage_service.delete.assert_awaited_once_with(saved_path)
        assert await reload_status(db_session, story) == AudioStatus.ERROR

    async def test_unexpected_error_wrapped(
        self, ctx, with_speech_key, make_story, synthesis_service, db_session, mock_speech_provider
    ):
        story = await make_story()
        mock_speech_provider.synthesize.side_effect = RuntimeError("boom")

        with pytest.raises(SynthesisFailedException):
            await synthesis_service.synthesize(ctx, story.id)

        assert await reload_status(db_session, story) == AudioStatus.ERROR
