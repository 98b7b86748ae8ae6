"""
Base Exception Classes
기본 예외 클래스

하위 클래스는 HTTP 상태 코드만 클래스 속성으로 지정한다.
도메인 예외(features/*/exceptions.py)는 이 클래스들 중 하나를 상속해
ErrorCode와 사용자 메시지를 고정한다.
"""

from typing import Any, ClassVar, Dict, Optional, Union

from fastapi import status

from .codes import ErrorCode


class AppException(Exception):
    """
    애플리케이션 기본 예외

    Attributes:
        error_code: ErrorCode 값 (응답의 error_code, 예: BIZ_201)
        message: 사용자에게 보여줄 메시지
        status_code: HTTP 상태 코드
        details: 추가 정보 (story_id, provider, reason 등)
    """

    status_code: ClassVar[int] = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(
        self,
        error_code: Union[ErrorCode, str],
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.error_code = getattr(error_code, "value", error_code)
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(error_code={self.error_code!r}, "
            f"status_code={self.status_code}, details={self.details!r})"
        )

    def to_log_extra(self) -> Dict[str, Any]:
        """로그 extra 필드"""
        return {
            "error_code": self.error_code,
            "status_code": self.status_code,
            "details": self.details,
        }


class AuthenticationException(AppException):
    """401 - 토큰 누락/만료, 로그인 실패"""

    status_code = status.HTTP_401_UNAUTHORIZED


class AuthorizationException(AppException):
    """403 - 다른 사용자의 아이 프로필/보이스 프리셋/동화에 접근"""

    status_code = status.HTTP_403_FORBIDDEN


class ValidationException(AppException):
    """400 - 요청 값 검증 실패 (pydantic 검증 이후 단계)"""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundException(AppException):
    """404 - 리소스 없음"""

    status_code = status.HTTP_404_NOT_FOUND


class ConflictException(AppException):
    """409 - 이메일 중복, 보이스 이름 중복, 낭독 음성 생성 중"""

    status_code = status.HTTP_409_CONFLICT


class BusinessLogicException(AppException):
    """400 - API 키 미등록/거부 등 사용자가 해결할 수 있는 상태"""

    status_code = status.HTTP_400_BAD_REQUEST


class ExternalServiceException(AppException):
    """502 - 텍스트 생성/음성 합성 Provider 호출 실패"""

    status_code = status.HTTP_502_BAD_GATEWAY


class InternalServerException(AppException):
    """500 - 저장소/DB 오류"""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
