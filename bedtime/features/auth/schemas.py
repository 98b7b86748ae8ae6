"""
Auth Schemas
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field

_EXAMPLE = {"email": "parent@example.com", "password": "goodnight123"}


class UserRegisterRequest(BaseModel):
    model_config = ConfigDict(json_schema_extra={"example": _EXAMPLE})

    email: EmailStr
    password: str = Field(..., min_length=8, max_length=128, description="8자 이상")


class UserLoginRequest(BaseModel):
    model_config = ConfigDict(json_schema_extra={"example": _EXAMPLE})

    email: EmailStr
    password: str = Field(..., max_length=128)


class UserResponse(BaseModel):
    """API 키 보유 여부는 GET /credentials/status에서 조회"""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    email: str
    created_at: datetime


class AuthResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: UserResponse
