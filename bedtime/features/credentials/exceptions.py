"""
Credential Domain Exceptions
Provider API 키 관련 예외
"""

from ...core.exceptions import BusinessLogicException, ErrorCode
from .models import CredentialKind

_KIND_LABELS = {
    CredentialKind.TEXT: "텍스트 생성",
    CredentialKind.SPEECH: "음성 합성",
}


class MissingCredentialException(BusinessLogicException):
    """API 키가 등록되지 않음"""

    def __init__(self, kind: CredentialKind):
        super().__init__(
            error_code=ErrorCode.BIZ_CREDENTIAL_MISSING,
            message=f"{_KIND_LABELS[kind]} API 키가 등록되지 않았습니다. 설정에서 API 키를 추가해주세요",
            details={"kind": kind.value},
        )
        self.kind = kind


class InvalidCredentialException(BusinessLogicException):
    """저장된 API 키를 복호화할 수 없거나 Provider가 거부함"""

    def __init__(self, kind: CredentialKind, reason: str = None):
        details = {"kind": kind.value}
        if reason:
            details["reason"] = reason
        super().__init__(
            error_code=ErrorCode.BIZ_CREDENTIAL_INVALID,
            message=f"{_KIND_LABELS[kind]} API 키가 올바르지 않습니다. 설정에서 API 키를 다시 등록해주세요",
            details=details,
        )
        self.kind = kind
