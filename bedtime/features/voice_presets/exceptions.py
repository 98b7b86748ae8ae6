"""
Voice Preset Domain Exceptions
보이스 프리셋 도메인 전용 커스텀 예외
"""

from ...core.exceptions import (
    AuthorizationException,
    ExternalServiceException,
    InternalServerException,
    NotFoundException,
    ErrorCode,
)


class VoicePresetNotFoundException(NotFoundException):
    """보이스 프리셋을 찾을 수 없음"""

    def __init__(self, preset_id: str):
        super().__init__(
            error_code=ErrorCode.BIZ_VOICE_PRESET_NOT_FOUND,
            message="보이스 프리셋을 찾을 수 없습니다",
            details={"voice_preset_id": preset_id},
        )


class VoicePresetAccessDeniedException(AuthorizationException):
    """다른 사용자의 보이스 프리셋"""

    def __init__(self, preset_id: str):
        super().__init__(
            error_code=ErrorCode.BIZ_VOICE_PRESET_UNAUTHORIZED,
            message="이 보이스 프리셋에 접근할 권한이 없습니다",
            details={"voice_preset_id": preset_id},
        )


class VoicePresetCreationFailedException(ExternalServiceException):
    """샘플 합성 또는 Provider 음성 등록 실패"""

    def __init__(self, reason: str = None):
        super().__init__(
            error_code=ErrorCode.BIZ_VOICE_PRESET_CREATION_FAILED,
            message="보이스 프리셋 생성에 실패했습니다",
            details={"reason": reason} if reason else None,
        )


class VoicePresetSaveFailedException(InternalServerException):
    """Provider 등록 후 DB 저장 실패"""

    def __init__(self, reason: str = None):
        super().__init__(
            error_code=ErrorCode.SYS_DATABASE_ERROR,
            message="보이스 프리셋 저장에 실패했습니다",
            details={"reason": reason} if reason else None,
        )
