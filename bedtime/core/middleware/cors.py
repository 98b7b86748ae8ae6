"""
CORS Middleware
Cross-Origin Resource Sharing 설정
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ..config import settings


def setup_cors(app: FastAPI) -> None:
    """
    CORS 미들웨어 설정

    X-Request-ID 헤더를 노출하여 프론트엔드가 에러 리포트에 첨부할 수 있게 함
    """
    allow_headers = (
        ["*"]
        if settings.cors_allow_headers == "*"
        else [h.strip() for h in settings.cors_allow_headers.split(",")]
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=[m.strip() for m in settings.cors_allow_methods.split(",")],
        allow_headers=allow_headers,
        expose_headers=["X-Request-ID"],
    )
