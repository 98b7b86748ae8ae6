"""
Request ID Middleware
asgi-correlation-id 기반 요청 추적 ID 설정
"""

from asgi_correlation_id import CorrelationIdMiddleware
from fastapi import FastAPI


def setup_request_id(app: FastAPI) -> None:
    """
    X-Request-ID 헤더를 읽거나 생성하여 contextvar에 저장

    로그(request_id 필드)와 에러 응답(request_id)에 동일 값이 사용됨
    """
    app.add_middleware(
        CorrelationIdMiddleware,
        header_name="X-Request-ID",
        update_request_header=True,
    )
