"""
Voice Preset Schemas
"""

import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class VoicePresetCreate(BaseModel):
    """보이스 프리셋 생성 요청"""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Grandma",
                "description": "A warm, slow grandmother voice with a soft smile",
            }
        }
    )

    name: str = Field(..., min_length=1, max_length=100, description="보이스 이름 (Provider 내 유일)")
    description: str = Field(..., min_length=1, max_length=1000, description="음성 자유 서술")


class VoicePresetUpdate(BaseModel):
    """로컬 이름/설명만 수정 (Provider 음성은 그대로)"""

    name: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = Field(None, min_length=1, max_length=1000)


class VoicePresetResponse(BaseModel):
    id: uuid.UUID
    name: str
    description: str
    sample_audio_url: Optional[str] = Field(None, description="샘플 음성 URL")
    created_at: datetime
