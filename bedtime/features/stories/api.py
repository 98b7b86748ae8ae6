"""
Story API Endpoints
동화 아이디어/생성/낭독/조회 API
"""

import uuid
from typing import List

from fastapi import APIRouter, Depends, status

from ...core.auth import UserContext, get_user_context
from ...core.exceptions import ErrorResponse
from .dependencies import (
    get_story_generation_service,
    get_story_idea_service,
    get_story_service,
    get_voice_synthesis_service,
)
from .exceptions import StoryNotFoundException
from .generation import StoryGenerationService, StoryIdeaService
from .models import Story
from .schemas import (
    FavoriteResponse,
    GenerateIdeasRequest,
    GenerateIdeasResponse,
    GenerateStoryRequest,
    StoryResponse,
)
from .service import StoryService
from .synthesis import VoiceSynthesisService

router = APIRouter(prefix="/stories", tags=["Stories"])


def to_story_response(story: Story, service: StoryService) -> StoryResponse:
    return StoryResponse(
        id=story.id,
        title=story.title,
        content=story.content,
        child_id=story.child_id,
        child_name=story.child_name,
        voice_preset_id=story.voice_preset_id,
        voice_name=story.voice_name,
        voice_description=story.voice_description,
        audio_status=story.audio_status,
        audio_url=service.get_audio_url(story),
        is_favorite=story.is_favorite,
        created_at=story.created_at,
    )


@router.get("", response_model=List[StoryResponse])
async def list_stories(
    ctx: UserContext = Depends(get_user_context),
    service: StoryService = Depends(get_story_service),
):
    """내 동화 목록 (최신순)"""
    stories = await service.list_stories(ctx)
    return [to_story_response(s, service) for s in stories]


@router.get("/favorites", response_model=List[StoryResponse])
async def list_favorite_stories(
    ctx: UserContext = Depends(get_user_context),
    service: StoryService = Depends(get_story_service),
):
    stories = await service.list_favorites(ctx)
    return [to_story_response(s, service) for s in stories]


@router.post(
    "/ideas",
    response_model=GenerateIdeasResponse,
    responses={
        400: {"model": ErrorResponse, "description": "텍스트 API 키 없음/거부"},
        502: {"model": ErrorResponse, "description": "아이디어 생성 실패"},
    },
)
async def generate_story_ideas(
    request: GenerateIdeasRequest,
    ctx: UserContext = Depends(get_user_context),
    service: StoryIdeaService = Depends(get_story_idea_service),
):
    """
    동화 아이디어 5개 생성

    기존 동화 제목과 겹치지 않도록 요청한다.
    """
    ideas = await service.generate_ideas(ctx, request.child)
    return GenerateIdeasResponse(ideas=ideas)


@router.post(
    "",
    response_model=StoryResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse, "description": "텍스트 API 키 없음/거부"},
        403: {"model": ErrorResponse, "description": "다른 사용자의 아이/프리셋"},
        404: {"model": ErrorResponse, "description": "아이/프리셋 없음"},
        502: {"model": ErrorResponse, "description": "본문 생성 실패"},
    },
)
async def generate_story(
    request: GenerateStoryRequest,
    ctx: UserContext = Depends(get_user_context),
    generation: StoryGenerationService = Depends(get_story_generation_service),
    service: StoryService = Depends(get_story_service),
):
    """선택한 아이디어로 동화 본문 생성 (audio_status=pending)"""
    story = await generation.generate_story(ctx, request.idea, request.child, request.voice)
    return to_story_response(story, service)


@router.get("/{story_id}", response_model=StoryResponse)
async def get_story(
    story_id: uuid.UUID,
    ctx: UserContext = Depends(get_user_context),
    service: StoryService = Depends(get_story_service),
):
    story = await service.get_story(ctx, story_id)
    if story is None:
        raise StoryNotFoundException(str(story_id))
    return to_story_response(story, service)


@router.post("/{story_id}/favorite", response_model=FavoriteResponse)
async def toggle_favorite(
    story_id: uuid.UUID,
    ctx: UserContext = Depends(get_user_context),
    service: StoryService = Depends(get_story_service),
):
    """즐겨찾기 토글 (변경 후 값 반환)"""
    is_favorite = await service.toggle_favorite(ctx, story_id)
    return FavoriteResponse(story_id=story_id, is_favorite=is_favorite)


@router.post(
    "/{story_id}/audio",
    response_model=StoryResponse,
    responses={
        400: {"model": ErrorResponse, "description": "음성 API 키 없음/거부"},
        409: {"model": ErrorResponse, "description": "이미 생성 중"},
        502: {"model": ErrorResponse, "description": "음성 합성 실패"},
    },
)
async def synthesize_story_audio(
    story_id: uuid.UUID,
    ctx: UserContext = Depends(get_user_context),
    synthesis: VoiceSynthesisService = Depends(get_voice_synthesis_service),
    service: StoryService = Depends(get_story_service),
):
    """
    낭독 음성 생성 (동기)

    긴 동화는 수 분이 걸릴 수 있다. 실패하면 audio_status=error로 남고 다시 호출해 재시도한다.
    """
    story = await synthesis.synthesize(ctx, story_id)
    return to_story_response(story, service)
