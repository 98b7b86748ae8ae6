"""
Global Exception Handlers
전역 예외 핸들러

모든 에러 응답은 _respond()를 거쳐 ErrorResponse 형식(JSON)으로 나간다.
request_id는 CorrelationIdMiddleware가 붙인 X-Request-ID와 같다.
"""

import logging
import uuid
from typing import Any, Dict, Mapping, Optional

from asgi_correlation_id import correlation_id
from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

from .base import AppException
from .codes import ErrorCode
from .schemas import ErrorDetail, ErrorResponse, ValidationErrorResponse

logger = logging.getLogger(__name__)

# Starlette 기본 HTTPException 상태 코드 -> ErrorCode
_HTTP_STATUS_CODES: Dict[int, ErrorCode] = {
    status.HTTP_400_BAD_REQUEST: ErrorCode.VAL_INVALID_INPUT,
    status.HTTP_401_UNAUTHORIZED: ErrorCode.AUTH_TOKEN_INVALID,
    status.HTTP_403_FORBIDDEN: ErrorCode.AUTH_TOKEN_INVALID,
    status.HTTP_404_NOT_FOUND: ErrorCode.BIZ_RESOURCE_NOT_FOUND,
    status.HTTP_405_METHOD_NOT_ALLOWED: ErrorCode.VAL_INVALID_INPUT,
    status.HTTP_409_CONFLICT: ErrorCode.BIZ_DUPLICATE_RESOURCE,
}


def _request_context(request: Request) -> Dict[str, Any]:
    return {"path": request.url.path, "method": request.method}


def _respond(
    body: BaseModel, headers: Optional[Mapping[str, str]] = None
) -> JSONResponse:
    payload = body.model_dump(mode="json")
    return JSONResponse(
        status_code=payload["status_code"], content=payload, headers=headers
    )


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """
    도메인 예외(AppException 하위 클래스) 처리

    5xx는 error, 나머지는 warning 레벨로 남긴다.
    """
    level = logging.ERROR if exc.status_code >= 500 else logging.WARNING
    logger.log(
        level,
        f"{type(exc).__name__}: {exc}",
        extra={**exc.to_log_extra(), **_request_context(request)},
    )

    return _respond(
        ErrorResponse(
            error_code=exc.error_code,
            message=exc.message,
            status_code=exc.status_code,
            request_id=correlation_id.get() or uuid.uuid4().hex,
            path=request.url.path,
            details=exc.details or None,
        )
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """요청 본문/쿼리 검증 실패 (422). child/voice selector의 kind 오류도 여기로 온다."""
    errors = [
        ErrorDetail(
            field=".".join(str(part) for part in err["loc"]),
            message=err["msg"],
            code=err.get("type"),
        )
        for err in exc.errors()
    ]
    logger.warning(
        "Request validation failed",
        extra={
            **_request_context(request),
            "validation_errors": [e.model_dump() for e in errors],
        },
    )

    return _respond(
        ValidationErrorResponse(
            error_code=ErrorCode.VAL_INVALID_INPUT.value,
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            request_id=correlation_id.get() or uuid.uuid4().hex,
            path=request.url.path,
            errors=errors,
        )
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """라우트 없음, Bearer 헤더 누락 같은 프레임워크 HTTPException"""
    error_code = _HTTP_STATUS_CODES.get(exc.status_code, ErrorCode.SYS_INTERNAL_ERROR)
    logger.warning(
        f"HTTP {exc.status_code}: {exc.detail}",
        extra={**_request_context(request), "status_code": exc.status_code},
    )

    return _respond(
        ErrorResponse(
            error_code=error_code.value,
            message=str(exc.detail),
            status_code=exc.status_code,
            request_id=correlation_id.get() or uuid.uuid4().hex,
            path=request.url.path,
        ),
        headers=getattr(exc, "headers", None),
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """처리되지 않은 예외는 500으로 감싼다. debug 모드에서만 원인을 노출한다."""
    from bedtime.core.config import settings

    logger.exception(
        f"Unhandled {type(exc).__name__}",
        extra={**_request_context(request), "exception_type": type(exc).__name__},
    )

    details = None
    if settings.debug:
        details = {"error": str(exc), "type": type(exc).__name__}

    return _respond(
        ErrorResponse(
            error_code=ErrorCode.SYS_INTERNAL_ERROR.value,
            message="서버 내부 오류가 발생했습니다. 잠시 후 다시 시도해주세요.",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            request_id=correlation_id.get() or uuid.uuid4().hex,
            path=request.url.path,
            details=details,
        )
    )
