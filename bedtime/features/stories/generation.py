"""
Story Generation Services
동화 아이디어 생성 / 본문 생성
"""

import logging
import uuid
from dataclasses import dataclass
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ...core.auth.context import UserContext
from ...core.utils.trace import log_process
from ...infrastructure.ai.exceptions import (
    ProviderAuthenticationException,
    ProviderRequestException,
)
from ...infrastructure.ai.factory import AIProviderFactory
from ..children.service import ChildProfileService
from ..credentials.exceptions import InvalidCredentialException
from ..credentials.models import CredentialKind
from ..credentials.service import CredentialService
from ..voice_presets.service import VoicePresetService
from .exceptions import (
    IdeaGenerationFailedException,
    StoryGenerationFailedException,
    StorySaveFailedException,
)
from .models import AudioStatus, Story
from .prompts import IDEA_COUNT, MAX_IDEA_TITLE_WORDS, build_idea_prompt, build_story_prompt
from .repository import StoryRepository
from .schemas import (
    AdHocChild,
    ChildSelector,
    SavedChild,
    SavedVoice,
    StoryIdea,
    StoryIdeaList,
    VoiceSelector,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedChild:
    """프롬프트에 들어갈 아이 정보 (저장된 프로필이면 child_id 포함)"""

    name: str
    age: int
    interests: str
    child_id: Optional[uuid.UUID] = None


@dataclass(frozen=True)
class ResolvedVoice:
    """동화에 스냅샷으로 남길 목소리 정보"""

    name: str
    voice_preset_id: Optional[uuid.UUID] = None
    description: Optional[str] = None


async def resolve_child(
    ctx: UserContext, child: ChildSelector, child_service: ChildProfileService
) -> ResolvedChild:
    """
    아이 선택 해석

    Raises:
        ChildNotFoundException / ChildAccessDeniedException
    """
    if isinstance(child, SavedChild):
        profile = await child_service.get_owned(ctx, child.child_id)
        return ResolvedChild(
            name=profile.name,
            age=profile.age,
            interests=profile.interests,
            child_id=profile.id,
        )
    if isinstance(child, AdHocChild):
        return ResolvedChild(name=child.name, age=child.age, interests=child.interests)
    raise ValueError(f"Unknown child selector: {child!r}")


async def resolve_voice(
    ctx: UserContext, voice: VoiceSelector, preset_service: VoicePresetService
) -> ResolvedVoice:
    """
    목소리 선택 해석

    Raises:
        VoicePresetNotFoundException / VoicePresetAccessDeniedException
    """
    if isinstance(voice, SavedVoice):
        preset = await preset_service.get_owned(ctx, voice.voice_preset_id)
        return ResolvedVoice(name=preset.name, voice_preset_id=preset.id)
    return ResolvedVoice(name=voice.name, description=voice.description)


def validate_ideas(result: StoryIdeaList) -> List[StoryIdea]:
    """
    아이디어 응답 검증

    Raises:
        ValueError: 개수, 빈 값, id 중복, 제목 길이 위반
    """
    ideas = result.stories
    if len(ideas) != IDEA_COUNT:
        raise ValueError(f"expected {IDEA_COUNT} ideas, got {len(ideas)}")

    seen_ids = set()
    for idea in ideas:
        if not idea.id.strip() or not idea.title.strip() or not idea.description.strip():
            raise ValueError("idea with empty id, title or description")
        if idea.id in seen_ids:
            raise ValueError(f"duplicate idea id: {idea.id}")
        seen_ids.add(idea.id)
        if len(idea.title.split()) > MAX_IDEA_TITLE_WORDS:
            raise ValueError(f"idea title too long: {idea.title}")

    return ideas


class StoryIdeaService:
    """
    동화 아이디어 생성 서비스

    아이 정보 + 기존 동화 제목으로 아이디어 5개를 생성한다. 재시도하지 않는다.
    """

    def __init__(
        self,
        story_repo: StoryRepository,
        child_service: ChildProfileService,
        credential_service: CredentialService,
        ai_factory: AIProviderFactory,
    ):
        self.story_repo = story_repo
        self.child_service = child_service
        self.credential_service = credential_service
        self.ai_factory = ai_factory

    @log_process(step="Generate Story Ideas", desc="동화 아이디어 생성")
    async def generate_ideas(self, ctx: UserContext, child: ChildSelector) -> List[StoryIdea]:
        """
        Raises:
            ChildNotFoundException / ChildAccessDeniedException
            MissingCredentialException / InvalidCredentialException
            IdeaGenerationFailedException: Provider 오류 또는 응답 검증 실패
        """
        resolved = await resolve_child(ctx, child, self.child_service)
        api_key = await self.credential_service.require_credential(ctx, CredentialKind.TEXT)

        titles = await self.story_repo.list_titles_for_user(ctx.user_id)
        prompt = build_idea_prompt(
            resolved.name, resolved.age, resolved.interests, existing_titles=titles
        )

        provider = self.ai_factory.get_text_provider(api_key)
        try:
            result = await provider.generate_structured(prompt, StoryIdeaList)
        except ProviderAuthenticationException as e:
            raise InvalidCredentialException(CredentialKind.TEXT, reason=str(e))
        except ProviderRequestException as e:
            raise IdeaGenerationFailedException(reason=e.reason)

        try:
            return validate_ideas(result)
        except ValueError as e:
            logger.warning(f"Invalid idea payload from provider: {e}")
            raise IdeaGenerationFailedException(reason=str(e))


class StoryGenerationService:
    """
    동화 본문 생성 서비스

    아이/목소리 해석 → 본문 생성 → audio_status=pending으로 저장
    """

    def __init__(
        self,
        story_repo: StoryRepository,
        child_service: ChildProfileService,
        preset_service: VoicePresetService,
        credential_service: CredentialService,
        ai_factory: AIProviderFactory,
        db_session: AsyncSession,
    ):
        self.story_repo = story_repo
        self.child_service = child_service
        self.preset_service = preset_service
        self.credential_service = credential_service
        self.ai_factory = ai_factory
        self.db_session = db_session

    @log_process(step="Generate Story", desc="동화 본문 생성")
    async def generate_story(
        self,
        ctx: UserContext,
        idea: StoryIdea,
        child: ChildSelector,
        voice: VoiceSelector,
    ) -> Story:
        """
        Raises:
            ChildNotFoundException / ChildAccessDeniedException
            VoicePresetNotFoundException / VoicePresetAccessDeniedException
            MissingCredentialException / InvalidCredentialException
            StoryGenerationFailedException: Provider 오류 또는 빈 본문
            StorySaveFailedException: 저장 실패
        """
        # 소유권 검사는 API 키 조회/Provider 호출보다 먼저
        resolved_child = await resolve_child(ctx, child, self.child_service)
        resolved_voice = await resolve_voice(ctx, voice, self.preset_service)

        api_key = await self.credential_service.require_credential(ctx, CredentialKind.TEXT)

        prompt = build_story_prompt(
            title=idea.title,
            description=idea.description,
            name=resolved_child.name,
            age=resolved_child.age,
            interests=resolved_child.interests,
        )

        provider = self.ai_factory.get_text_provider(api_key)
        try:
            content = await provider.generate_text(prompt)
        except ProviderAuthenticationException as e:
            raise InvalidCredentialException(CredentialKind.TEXT, reason=str(e))
        except ProviderRequestException as e:
            raise StoryGenerationFailedException(reason=e.reason)

        if not content or not content.strip():
            raise StoryGenerationFailedException(reason="empty story text")

        try:
            story = await self.story_repo.create(
                user_id=ctx.user_id,
                title=idea.title,
                content=content.strip(),
                child_id=resolved_child.child_id,
                child_name=resolved_child.name,
                voice_preset_id=resolved_voice.voice_preset_id,
                voice_name=resolved_voice.name,
                voice_description=resolved_voice.description,
                audio_status=AudioStatus.PENDING,
            )
            await self.db_session.commit()
        except SQLAlchemyError as e:
            await self.db_session.rollback()
            logger.error(f"Story save failed after generation: {e}")
            raise StorySaveFailedException(reason=str(e))

        logger.info(f"Story created: {story.id} (user={ctx.user_id})")
        return story
