"""
JWT Manager

python-jose HS256 Access Token. payload: sub(user_id), email, type, iat, exp
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from jose import ExpiredSignatureError, JWTError, jwt

from ..config import settings
from .exceptions import InvalidTokenException, TokenExpiredException

ACCESS_TOKEN_TYPE = "access"


class JWTManager:
    @staticmethod
    def create_access_token(
        data: Dict[str, Any],
        expires_delta: Optional[timedelta] = None,
    ) -> str:
        """
        Args:
            data: 추가 claim (sub, email)
            expires_delta: 기본값은 JWT_ACCESS_TOKEN_EXPIRE_MINUTES
        """
        now = datetime.now(timezone.utc)
        lifetime = expires_delta or timedelta(minutes=settings.jwt_access_token_expire_minutes)
        claims = {**data, "type": ACCESS_TOKEN_TYPE, "iat": now, "exp": now + lifetime}
        return jwt.encode(claims, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)

    @staticmethod
    def decode_token(token: str) -> Dict[str, Any]:
        """
        서명과 exp 검증

        Raises:
            TokenExpiredException
            InvalidTokenException
        """
        try:
            return jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
        except ExpiredSignatureError:
            raise TokenExpiredException()
        except JWTError:
            raise InvalidTokenException("bad signature or payload")

    @staticmethod
    def verify_token(token: str, token_type: str = ACCESS_TOKEN_TYPE) -> Dict[str, Any]:
        payload = JWTManager.decode_token(token)
        if payload.get("type") != token_type:
            raise InvalidTokenException(f"expected {token_type} token")
        return payload
