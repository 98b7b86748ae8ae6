"""
Child Profile Schemas
"""

import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ChildProfileCreate(BaseModel):
    """아이 프로필 생성 요청"""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"name": "Mia", "age": 5, "interests": "dinosaurs, the moon"}
        }
    )

    name: str = Field(..., min_length=1, max_length=100, description="아이 이름")
    age: int = Field(..., ge=0, le=18, description="나이")
    interests: str = Field(default="", max_length=1000, description="관심사 (자유 서술)")


class ChildProfileUpdate(BaseModel):
    """아이 프로필 수정 요청 (보낸 필드만 수정)"""

    name: Optional[str] = Field(None, min_length=1, max_length=100)
    age: Optional[int] = Field(None, ge=0, le=18)
    interests: Optional[str] = Field(None, max_length=1000)


class ChildProfileResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    name: str
    age: int
    interests: str
    created_at: datetime
