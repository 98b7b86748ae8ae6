"""
Authentication Dependencies
FastAPI Depends용 인증 의존성
"""

import uuid

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from .context import UserContext
from .exceptions import InvalidTokenException
from .jwt_manager import JWTManager

# HTTP Bearer 토큰 스킴 (헤더 누락 시 401은 직접 처리)
security = HTTPBearer(auto_error=False)


async def get_user_context(
    credentials: HTTPAuthorizationCredentials = Depends(security),
) -> UserContext:
    """
    Bearer 토큰에서 UserContext 생성

    Raises:
        InvalidTokenException: 토큰 누락, 서명 오류, sub 형식 오류
        TokenExpiredException: 만료된 토큰
    """
    if credentials is None:
        raise InvalidTokenException("missing bearer token")

    payload = JWTManager.verify_token(credentials.credentials, token_type="access")

    try:
        user_id = uuid.UUID(payload.get("sub", ""))
    except (TypeError, ValueError):
        raise InvalidTokenException("malformed subject")

    return UserContext(user_id=user_id, email=payload.get("email"))
