"""
Child Profile API Endpoints
"""

import uuid
from typing import List

from fastapi import APIRouter, Depends, status

from ...core.auth import UserContext, get_user_context
from ..stories.api import to_story_response
from ..stories.dependencies import get_story_service
from ..stories.schemas import StoryResponse
from ..stories.service import StoryService
from .dependencies import get_child_profile_service
from .exceptions import ChildNotFoundException
from .schemas import ChildProfileCreate, ChildProfileResponse, ChildProfileUpdate
from .service import ChildProfileService

router = APIRouter(prefix="/children", tags=["Children"])


@router.get("", response_model=List[ChildProfileResponse])
async def list_children(
    ctx: UserContext = Depends(get_user_context),
    service: ChildProfileService = Depends(get_child_profile_service),
):
    """내 아이 프로필 목록 (최신순)"""
    return await service.list(ctx)


@router.post("", response_model=ChildProfileResponse, status_code=status.HTTP_201_CREATED)
async def create_child(
    request: ChildProfileCreate,
    ctx: UserContext = Depends(get_user_context),
    service: ChildProfileService = Depends(get_child_profile_service),
):
    return await service.create(ctx, request.name, request.age, request.interests)


@router.get("/{child_id}", response_model=ChildProfileResponse)
async def get_child(
    child_id: uuid.UUID,
    ctx: UserContext = Depends(get_user_context),
    service: ChildProfileService = Depends(get_child_profile_service),
):
    child = await service.get(ctx, child_id)
    if child is None:
        raise ChildNotFoundException(str(child_id))
    return child


@router.patch("/{child_id}", response_model=ChildProfileResponse)
async def update_child(
    child_id: uuid.UUID,
    request: ChildProfileUpdate,
    ctx: UserContext = Depends(get_user_context),
    service: ChildProfileService = Depends(get_child_profile_service),
):
    return await service.update(
        ctx,
        child_id,
        name=request.name,
        age=request.age,
        interests=request.interests,
    )


@router.delete("/{child_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_child(
    child_id: uuid.UUID,
    ctx: UserContext = Depends(get_user_context),
    service: ChildProfileService = Depends(get_child_profile_service),
):
    """아이 프로필 삭제 (동화는 유지)"""
    await service.delete(ctx, child_id)


@router.get("/{child_id}/stories", response_model=List[StoryResponse])
async def list_child_stories(
    child_id: uuid.UUID,
    ctx: UserContext = Depends(get_user_context),
    story_service: StoryService = Depends(get_story_service),
):
    """이 아이로 만든 동화 목록"""
    stories = await story_service.list_by_child(ctx, child_id)
    return [to_story_response(s, story_service) for s in stories]
