"""
Core Exceptions

도메인 예외는 아래 기본 클래스 중 하나를 상속하고, main.py가
handlers의 함수들을 FastAPI 예외 핸들러로 등록한다.
"""

from .base import (
    AppException,
    AuthenticationException,
    AuthorizationException,
    BusinessLogicException,
    ConflictException,
    ExternalServiceException,
    InternalServerException,
    NotFoundException,
    ValidationException,
)
from .codes import ErrorCode
from .schemas import ErrorDetail, ErrorResponse, ValidationErrorResponse

__all__ = [
    "AppException",
    "AuthenticationException",
    "AuthorizationException",
    "BusinessLogicException",
    "ConflictException",
    "ExternalServiceException",
    "InternalServerException",
    "NotFoundException",
    "ValidationException",
    "ErrorCode",
    "ErrorDetail",
    "ErrorResponse",
    "ValidationErrorResponse",
]
