"""
StoryIdeaService 단위 테스트
"""

import uuid

import pytest

from bedtime.features.children.exceptions import (
    ChildAccessDeniedException,
    ChildNotFoundException,
)
from bedtime.features.credentials.exceptions import (
    InvalidCredentialException,
    MissingCredentialException,
)
from bedtime.features.stories.exceptions import IdeaGenerationFailedException
from bedtime.features.stories.generation import StoryIdeaService, validate_ideas
from bedtime.features.stories.schemas import (
    AdHocChild,
    SavedChild,
    StoryIdea,
    StoryIdeaList,
)
from bedtime.infrastructure.ai.exceptions import (
    ProviderAuthenticationException,
    ProviderRequestException,
)


def make_ideas(count=5, **overrides):
    ideas = [
        StoryIdea(
            id=f"idea-{i}",
            title=f"Mia and the Moon {i}",
            description="A little dinosaur helps the moon find its way home.",
        )
        for i in range(count)
    ]
    for index, fields in overrides.items():
        ideas[int(index)] = ideas[int(index)].model_copy(update=fields)
    return StoryIdeaList(stories=ideas)


@pytest.fixture
def idea_service(story_repo, child_service, credential_service, mock_ai_factory):
    return StoryIdeaService(
        story_repo=story_repo,
        child_service=child_service,
        credential_service=credential_service,
        ai_factory=mock_ai_factory,
    )


class TestValidateIdeas:
    def test_valid(self):
        assert len(validate_ideas(make_ideas())) == 5

    def test_wrong_count(self):
        with pytest.raises(ValueError):
            validate_ideas(make_ideas(count=4))

    def test_duplicate_ids(self):
        with pytest.raises(ValueError):
            validate_ideas(make_ideas(**{"1": {"id": "idea-0"}}))

    def test_empty_title(self):
        with pytest.raises(ValueError):
            validate_ideas(make_ideas(**{"2": {"title": "  "}}))

    def test_title_too_long(self):
        long_title = "one two three four five six seven eight nine ten eleven"
        with pytest.raises(ValueError):
            validate_ideas(make_ideas(**{"3": {"title": long_title}}))

    def test_ten_word_title_allowed(self):
        title = "one two three four five six seven eight nine ten"
        assert validate_ideas(make_ideas(**{"0": {"title": title}}))[0].title == title


class TestStoryIdeaService:
    async def test_generate_for_saved_child(
        self, ctx, child, with_text_key, idea_service, mock_ai_factory, mock_text_provider
    ):
        mock_text_provider.generate_structured.return_value = make_ideas()

        ideas = await idea_service.generate_ideas(ctx, SavedChild(child_id=child.id))

        assert len(ideas) == 5
        mock_ai_factory.get_text_provider.assert_called_once_with("google-key")
        prompt, schema = mock_text_provider.generate_structured.call_args.args
        assert schema is StoryIdeaList
        assert "Mia" in prompt
        assert "5 years old" in prompt
        assert "dinosaurs" in prompt
        assert "already taken" not in prompt

    async def test_prompt_lists_existing_titles(
        self, ctx, with_text_key, make_story, idea_service, mock_text_provider
    ):
        await make_story(title="The Brave Little Star")
        mock_text_provider.generate_structured.return_value = make_ideas()

        await idea_service.generate_ideas(ctx, AdHocChild(name="Leo", age=4, interests="trucks"))

        prompt = mock_text_provider.generate_structured.call_args.args[0]
        assert "already taken" in prompt
        assert "The Brave Little Star" in prompt

    async def test_foreign_child_checked_before_credential(
        self, ctx, other_ctx, child_service, idea_service, mock_text_provider
    ):
        foreign = await child_service.create(other_ctx, name="Zoe", age=7)

        # API 키가 없어도 소유권 오류가 먼저
        with pytest.raises(ChildAccessDeniedException):
            await idea_service.generate_ideas(ctx, SavedChild(child_id=foreign.id))

        mock_text_provider.generate_structured.assert_not_called()

    async def test_missing_credential(self, ctx, idea_service, mock_text_provider):
        with pytest.raises(MissingCredentialException):
            await idea_service.generate_ideas(ctx, AdHocChild(name="Leo", age=4))

        mock_text_provider.generate_structured.assert_not_called()

    async def test_invalid_payload(self, ctx, with_text_key, idea_service, mock_text_provider):
        mock_text_provider.generate_structured.return_value = make_ideas(count=3)

        with pytest.raises(IdeaGenerationFailedException) as exc_info:
            await idea_service.generate_ideas(ctx, AdHocChild(name="Leo", age=4))

        assert exc_info.value.status_code == 502

    async def test_provider_failure(self, ctx, with_text_key, idea_service, mock_text_provider):
        mock_text_provider.generate_structured.side_effect = ProviderRequestException(
            "Google Gemini", reason="overloaded"
        )

        with pytest.raises(IdeaGenerationFailedException):
            await idea_service.generate_ideas(ctx, AdHocChild(name="Leo", age=4))

    async def test_provider_rejects_key(
        self, ctx, with_text_key, idea_service, mock_text_provider
    ):
        mock_text_provider.generate_structured.side_effect = ProviderAuthenticationException(
            "Google Gemini"
        )

        with pytest.raises(InvalidCredentialException):
            await idea_service.generate_ideas(ctx, AdHocChild(name="Leo", age=4))

    async def test_missing_saved_child(self, ctx, with_text_key, idea_service):
        with pytest.raises(ChildNotFoundException):
            await idea_service.generate_ideas(ctx, SavedChild(child_id=uuid.uuid4()))
