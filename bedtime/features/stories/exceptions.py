"""
Story Domain Exceptions
동화 도메인 전용 커스텀 예외
"""

from ...core.exceptions import (
    AuthorizationException,
    ConflictException,
    ExternalServiceException,
    InternalServerException,
    NotFoundException,
    ErrorCode,
)


class StoryNotFoundException(NotFoundException):
    """동화를 찾을 수 없음"""

    def __init__(self, story_id: str):
        super().__init__(
            error_code=ErrorCode.BIZ_STORY_NOT_FOUND,
            message="요청하신 동화를 찾을 수 없습니다",
            details={"story_id": story_id},
        )


class StoryAccessDeniedException(AuthorizationException):
    """다른 사용자의 동화"""

    def __init__(self, story_id: str):
        super().__init__(
            error_code=ErrorCode.BIZ_STORY_UNAUTHORIZED,
            message="이 동화에 접근할 권한이 없습니다",
            details={"story_id": story_id},
        )


class IdeaGenerationFailedException(ExternalServiceException):
    """아이디어 생성 실패 (Provider 오류 또는 형식 불일치)"""

    def __init__(self, reason: str = None):
        super().__init__(
            error_code=ErrorCode.BIZ_IDEA_GENERATION_FAILED,
            message="동화 아이디어 생성에 실패했습니다. API 키가 올바른지 확인해주세요",
            details={"reason": reason} if reason else None,
        )


class StoryGenerationFailedException(ExternalServiceException):
    """본문 생성 실패"""

    def __init__(self, reason: str = None):
        super().__init__(
            error_code=ErrorCode.BIZ_STORY_GENERATION_FAILED,
            message="동화 생성에 실패했습니다. API 키가 올바른지 확인해주세요",
            details={"reason": reason} if reason else None,
        )


class StorySaveFailedException(InternalServerException):
    """생성된 동화 저장 실패"""

    def __init__(self, reason: str = None):
        super().__init__(
            error_code=ErrorCode.BIZ_STORY_SAVE_FAILED,
            message="생성된 동화를 저장하지 못했습니다",
            details={"reason": reason} if reason else None,
        )


class SynthesisFailedException(ExternalServiceException):
    """낭독 음성 생성 실패"""

    def __init__(self, story_id: str, reason: str = None):
        details = {"story_id": story_id}
        if reason:
            details["reason"] = reason
        super().__init__(
            error_code=ErrorCode.BIZ_SYNTHESIS_FAILED,
            message="낭독 음성 생성에 실패했습니다. 잠시 후 다시 시도해주세요",
            details=details,
        )


class SynthesisInProgressException(ConflictException):
    """이미 낭독 음성을 생성 중"""

    def __init__(self, story_id: str):
        super().__init__(
            error_code=ErrorCode.BIZ_SYNTHESIS_IN_PROGRESS,
            message="이미 낭독 음성을 생성하고 있습니다",
            details={"story_id": story_id},
        )
