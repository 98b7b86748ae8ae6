"""
StoryGenerationService 단위 테스트
"""

from unittest.mock import AsyncMock

import pytest
from sqlalchemy.exc import OperationalError

from bedtime.features.children.exceptions import ChildAccessDeniedException
from bedtime.features.credentials.exceptions import MissingCredentialException
from bedtime.features.stories.exceptions import (
    StoryGenerationFailedException,
    StorySaveFailedException,
)
from bedtime.features.stories.generation import StoryGenerationService
from bedtime.features.stories.models import AudioStatus
from bedtime.features.stories.schemas import (
    AdHocChild,
    AdHocVoice,
    SavedChild,
    SavedVoice,
    StoryIdea,
)
from bedtime.features.voice_presets.exceptions import VoicePresetAccessDeniedException
from bedtime.features.voice_presets.repository import VoicePresetRepository
from bedtime.infrastructure.ai.exceptions import ProviderRequestException

IDEA = StoryIdea(
    id="idea-1",
    title="Mia and the Sleepy Moon Dinosaur",
    description="A little dinosaur helps the moon find its way home.",
)

NARRATOR = AdHocVoice(name="Calm narrator", description="A calm, warm narrator")


@pytest.fixture
def generation_service(
    story_repo, child_service, preset_service, credential_service, mock_ai_factory, db_session
):
    return StoryGenerationService(
        story_repo=story_repo,
        child_service=child_service,
        preset_service=preset_service,
        credential_service=credential_service,
        ai_factory=mock_ai_factory,
        db_session=db_session,
    )


class TestStoryGenerationService:
    async def test_saved_child_and_preset(
        self, ctx, child, preset, with_text_key, generation_service, mock_text_provider
    ):
        story = await generation_service.generate_story(
            ctx, IDEA, SavedChild(child_id=child.id), SavedVoice(voice_preset_id=preset.id)
        )

        assert story.user_id == ctx.user_id
        assert story.title == IDEA.title
        assert story.content == "Once upon a time...\n\nThe end."
        assert story.child_id == child.id
        assert story.child_name == "Mia"
        assert story.voice_preset_id == preset.id
        assert story.voice_name == "Grandma"
        assert story.voice_description is None
        assert story.audio_status == AudioStatus.PENDING
        assert story.audio_storage_path is None
        assert story.is_favorite is False

        prompt = mock_text_provider.generate_text.call_args.args[0]
        assert IDEA.title in prompt
        assert IDEA.description in prompt
        assert "Mia who is 5 years old and likes dinosaurs" in prompt

    async def test_ad_hoc_child_and_voice(self, ctx, with_text_key, generation_service):
        story = await generation_service.generate_story(
            ctx, IDEA, AdHocChild(name="Leo", age=4, interests="trucks"), NARRATOR
        )

        assert story.child_id is None
        assert story.child_name == "Leo"
        assert story.voice_preset_id is None
        assert story.voice_name == "Calm narrator"
        assert story.voice_description == "A calm, warm narrator"

    async def test_foreign_preset_checked_before_provider(
        self, ctx, other_ctx, db_session, child, with_text_key, generation_service, mock_text_provider
    ):
        foreign = await VoicePresetRepository(db_session).create(
            user_id=other_ctx.user_id,
            name="Robot",
            description="beep",
            provider_voice_id="voice-Robot",
            provider_voice_name="Robot",
            sample_audio_path="users/x/voice_presets/robot.wav",
        )
        await db_session.commit()

        with pytest.raises(VoicePresetAccessDeniedException):
            await generation_service.generate_story(
                ctx, IDEA, SavedChild(child_id=child.id), SavedVoice(voice_preset_id=foreign.id)
            )

        mock_text_provider.generate_text.assert_not_called()

    async def test_foreign_child(
        self, ctx, other_ctx, child_service, generation_service, mock_text_provider
    ):
        foreign = await child_service.create(other_ctx, name="Zoe", age=7)

        with pytest.raises(ChildAccessDeniedException):
            await generation_service.generate_story(
                ctx, IDEA, SavedChild(child_id=foreign.id), NARRATOR
            )

        mock_text_provider.generate_text.assert_not_called()

    async def test_missing_credential(self, ctx, generation_service, story_repo):
        with pytest.raises(MissingCredentialException):
            await generation_service.generate_story(
                ctx, IDEA, AdHocChild(name="Leo", age=4), NARRATOR
            )

        assert await story_repo.list_for_user(ctx.user_id) == []

    async def test_provider_failure_saves_nothing(
        self, ctx, with_text_key, generation_service, mock_text_provider, story_repo
    ):
        mock_text_provider.generate_text.side_effect = ProviderRequestException(
            "Google Gemini", reason="timeout"
        )

        with pytest.raises(StoryGenerationFailedException):
            await generation_service.generate_story(
                ctx, IDEA, AdHocChild(name="Leo", age=4), NARRATOR
            )

        assert await story_repo.list_for_user(ctx.user_id) == []

    async def test_empty_text(
        self, ctx, with_text_key, generation_service, mock_text_provider
    ):
        mock_text_provider.generate_text.return_value = "   \n"

        with pytest.raises(StoryGenerationFailedException):
            await generation_service.generate_story(
                ctx, IDEA, AdHocChild(name="Leo", age=4), NARRATOR
            )

    async def test_save_failure(self, ctx, with_text_key, generation_service, story_repo):
        story_repo.create = AsyncMock(
            side_effect=OperationalError("INSERT INTO stories", {}, Exception("disk full"))
        )

        with pytest.raises(StorySaveFailedException) as exc_info:
            await generation_service.generate_story(
                ctx, IDEA, AdHocChild(name="Leo", age=4), NARRATOR
            )

        assert exc_info.value.status_code == 500
