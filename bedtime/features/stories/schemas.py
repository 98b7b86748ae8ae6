"""
Story Schemas
동화 아이디어/생성/조회 Request·Response 스키마
"""

import uuid
from datetime import datetime
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from .models import AudioStatus


# ==================== Selectors ====================


class SavedChild(BaseModel):
    """저장된 아이 프로필 선택"""

    kind: Literal["saved"] = "saved"
    child_id: uuid.UUID


class AdHocChild(BaseModel):
    """저장하지 않고 직접 입력한 아이 정보"""

    kind: Literal["ad_hoc"] = "ad_hoc"
    name: str = Field(..., min_length=1, max_length=100)
    age: int = Field(..., ge=0, le=18)
    interests: str = Field(default="", max_length=1000)


ChildSelector = Annotated[Union[SavedChild, AdHocChild], Field(discriminator="kind")]


class SavedVoice(BaseModel):
    """저장된 보이스 프리셋 선택"""

    kind: Literal["preset"] = "preset"
    voice_preset_id: uuid.UUID


class AdHocVoice(BaseModel):
    """직접 입력한 음성 이름/설명"""

    kind: Literal["description"] = "description"
    name: str = Field(..., min_length=1, max_length=100)
    description: str = Field(..., min_length=1, max_length=1000)


VoiceSelector = Annotated[Union[SavedVoice, AdHocVoice], Field(discriminator="kind")]


# ==================== Ideas ====================


class StoryIdea(BaseModel):
    """동화 아이디어"""

    id: str = Field(..., description="The unique ID of the story idea")
    title: str = Field(
        ...,
        description="A catchy, child-friendly title for the bedtime story. No more than 6-10 words.",
    )
    description: str = Field(
        ...,
        description=(
            "A brief 1-2 sentences description that previews the story's plot. "
            "It's important parents understand what the story is about and can ask "
            "their kid if they want to hear it."
        ),
    )


class StoryIdeaList(BaseModel):
    """텍스트 Provider 구조화 응답 스키마"""

    stories: List[StoryIdea] = Field(
        ..., description="Five unique bedtime story ideas for a child"
    )


class GenerateIdeasRequest(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "child": {"kind": "ad_hoc", "name": "Mia", "age": 5, "interests": "dinosaurs"}
            }
        }
    )

    child: ChildSelector


class GenerateIdeasResponse(BaseModel):
    ideas: List[StoryIdea]


# ==================== Story ====================


class GenerateStoryRequest(BaseModel):
    """선택한 아이디어로 동화 본문 생성"""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "idea": {
                    "id": "idea-1",
                    "title": "Mia and the Sleepy Moon Dinosaur",
                    "description": "A little dinosaur helps the moon find its way home.",
                },
                "child": {"kind": "saved", "child_id": "3fa85f64-5717-4562-b3fc-2c963f66afa6"},
                "voice": {"kind": "description", "name": "Calm narrator", "description": "A calm, warm narrator"},
            }
        }
    )

    idea: StoryIdea
    child: ChildSelector
    voice: VoiceSelector


class StoryResponse(BaseModel):
    """동화 상세 응답"""

    id: uuid.UUID
    title: str
    content: str
    child_id: Optional[uuid.UUID] = None
    child_name: str
    voice_preset_id: Optional[uuid.UUID] = None
    voice_name: str
    voice_description: Optional[str] = None
    audio_status: AudioStatus
    audio_url: Optional[str] = Field(None, description="낭독 음성 URL (ready일 때만)")
    is_favorite: bool
    created_at: datetime


class FavoriteResponse(BaseModel):
    story_id: uuid.UUID
    is_favorite: bool
