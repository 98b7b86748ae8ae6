"""
Storage Exceptions
파일 저장소 관련 예외
"""

from ...core.exceptions import InternalServerException, ErrorCode


class StorageFailedException(InternalServerException):
    """파일 저장/삭제 실패"""

    def __init__(self, path: str = None, reason: str = None):
        details = {}
        if path:
            details["path"] = path
        if reason:
            details["reason"] = reason
        super().__init__(
            error_code=ErrorCode.SYS_STORAGE_ERROR,
            message="파일 저장소 처리에 실패했습니다",
            details=details or None,
        )
