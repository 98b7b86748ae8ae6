"""
Core Authentication Exceptions

Bearer 토큰 검증 단계에서 발생하는 401 예외. 응답 메시지는 원인과 관계없이
같게 두고, 원인은 details["reason"]으로만 남긴다(로그 확인용).
"""

from typing import Optional

from ..exceptions import AuthenticationException, ErrorCode


class InvalidTokenException(AuthenticationException):
    def __init__(self, reason: Optional[str] = None):
        super().__init__(
            error_code=ErrorCode.AUTH_TOKEN_INVALID,
            message="유효하지 않은 토큰입니다",
            details={"reason": reason} if reason else None,
        )
        self.reason = reason


class TokenExpiredException(AuthenticationException):
    """exp가 지난 토큰. 클라이언트는 다시 로그인한다."""

    def __init__(self):
        super().__init__(
            error_code=ErrorCode.AUTH_TOKEN_EXPIRED,
            message="토큰이 만료되었습니다. 다시 로그인해주세요",
        )


class UnknownUserException(AuthenticationException):
    """서명은 유효하지만 sub의 사용자가 삭제되었거나 존재하지 않음"""

    def __init__(self, user_id: str):
        super().__init__(
            error_code=ErrorCode.AUTH_USER_NOT_FOUND,
            message="사용자를 확인할 수 없습니다. 다시 로그인해주세요",
            details={"user_id": user_id},
        )
