"""
Child Profile Domain Exceptions
"""

from ...core.exceptions import AuthorizationException, NotFoundException, ErrorCode


class ChildNotFoundException(NotFoundException):
    """아이 프로필을 찾을 수 없음"""

    def __init__(self, child_id: str):
        super().__init__(
            error_code=ErrorCode.BIZ_CHILD_NOT_FOUND,
            message="아이 프로필을 찾을 수 없습니다",
            details={"child_id": child_id},
        )


class ChildAccessDeniedException(AuthorizationException):
    """다른 사용자의 아이 프로필"""

    def __init__(self, child_id: str):
        super().__init__(
            error_code=ErrorCode.BIZ_CHILD_UNAUTHORIZED,
            message="이 아이 프로필에 접근할 권한이 없습니다",
            details={"child_id": child_id},
        )
