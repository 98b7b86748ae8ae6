"""
Authentication Module
JWT, 비밀번호 인증, 요청 사용자 컨텍스트
"""

from .context import UserContext
from .jwt_manager import JWTManager
from .dependencies import get_user_context

__all__ = [
    "UserContext",
    "JWTManager",
    "get_user_context",
]
