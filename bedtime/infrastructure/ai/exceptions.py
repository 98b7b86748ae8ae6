"""
AI Provider Exceptions
외부 Provider 호출 실패를 표현하는 예외

Provider 구현체는 SDK/HTTP 예외 대신 아래 예외만 던진다.
"""

from typing import Optional

from ...core.exceptions import (
    BusinessLogicException,
    ConflictException,
    ExternalServiceException,
    ErrorCode,
)


class ProviderRequestException(ExternalServiceException):
    """Provider 호출 실패 (네트워크, 타임아웃, 5xx, 잘못된 응답)"""

    def __init__(
        self,
        provider: str,
        reason: str,
        status_code: Optional[int] = None,
    ):
        details = {"provider": provider, "reason": reason}
        if status_code is not None:
            details["provider_status"] = status_code
        super().__init__(
            error_code=ErrorCode.EXT_PROVIDER_ERROR,
            message=f"{provider} 호출에 실패했습니다",
            details=details,
        )
        self.provider = provider
        self.reason = reason


class ProviderAuthenticationException(BusinessLogicException):
    """Provider가 API 키를 거부함 (401/403)"""

    def __init__(self, provider: str, reason: Optional[str] = None):
        super().__init__(
            error_code=ErrorCode.EXT_PROVIDER_AUTH_FAILED,
            message=f"{provider} API 인증에 실패했습니다. API 키를 확인해주세요",
            details={"provider": provider, "reason": reason} if reason else {"provider": provider},
        )
        self.provider = provider


class DuplicateVoiceNameException(ConflictException):
    """Provider에 같은 이름의 음성이 이미 등록됨"""

    def __init__(self, name: Optional[str] = None):
        super().__init__(
            error_code=ErrorCode.BIZ_VOICE_NAME_DUPLICATE,
            message="이미 사용 중인 보이스 이름입니다. 다른 이름을 입력해주세요",
            details={"name": name} if name else None,
        )
