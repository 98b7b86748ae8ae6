"""
Auth Domain Exceptions
회원가입/로그인 예외
"""

from ...core.exceptions import AuthenticationException, ConflictException, ErrorCode


class InvalidCredentialsException(AuthenticationException):
    """
    로그인 실패

    이메일 미등록과 비밀번호 불일치를 구분하지 않는다.
    """

    def __init__(self):
        super().__init__(
            error_code=ErrorCode.AUTH_INVALID_CREDENTIALS,
            message="이메일 또는 비밀번호가 일치하지 않습니다",
        )


class EmailAlreadyExistsException(ConflictException):
    def __init__(self, email: str):
        super().__init__(
            error_code=ErrorCode.AUTH_EMAIL_ALREADY_EXISTS,
            message=f"이미 가입된 이메일입니다: {email}",
            details={"email": email},
        )
        self.email = email
