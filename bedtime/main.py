"""
Bedtime Story Service

uvicorn bedtime.main:app
"""

import asyncio
import contextlib
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.openapi.utils import get_openapi
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.v1.router import api_router as api_v1_router
from .core.config import settings
from .core.database import Base, engine
from .core.exceptions import AppException
from .core.exceptions.handlers import (
    app_exception_handler,
    generic_exception_handler,
    http_exception_handler,
    validation_exception_handler,
)
from .core.logging import configure_logging, get_logger
from .core.middleware import setup_cors, setup_request_id
from .core.tasks.audio_reaper import sweep_stale_audio_periodically
from .domain import models  # noqa: F401  (Base.metadata에 테이블 등록)

configure_logging()
logger = get_logger(__name__)

TAGS_METADATA = [
    {"name": "Authentication", "description": "이메일/비밀번호 가입과 로그인, 현재 사용자 조회"},
    {
        "name": "Credentials",
        "description": (
            "Provider API 키 등록/교체. `text`는 Gemini, `speech`는 Hume. "
            "키는 암호화 저장되며 다시 조회할 수 없다."
        ),
    },
    {"name": "Children", "description": "아이 프로필 (이름, 나이, 관심사)"},
    {
        "name": "Voice Presets",
        "description": "음성 설명으로 샘플을 합성해 Provider에 이름 있는 음성으로 등록",
    },
    {
        "name": "Stories",
        "description": (
            "1. `POST /stories/ideas` 아이디어 5개\n"
            "2. `POST /stories` 본문 생성 (audio_status=pending)\n"
            "3. `POST /stories/{id}/audio` 낭독 음성 생성 (generating -> ready | error)"
        ),
    },
    {"name": "Files", "description": "로컬 스토리지 파일 제공"},
    {"name": "Health", "description": "서비스 상태"},
]

EXCEPTION_HANDLERS = {
    AppException: app_exception_handler,
    RequestValidationError: validation_exception_handler,
    StarletteHTTPException: http_exception_handler,
    Exception: generic_exception_handler,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(
        "Service starting",
        service=settings.app_title,
        version=settings.app_version,
        environment=settings.app_env,
    )

    # 개발 모드 편의용. 그 외 환경은 alembic upgrade head
    if settings.app_env == "dev" and settings.debug:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables created (development mode)")

    reaper = None
    if settings.audio_reaper_enabled:
        reaper = asyncio.create_task(
            sweep_stale_audio_periodically(
                interval=settings.audio_reaper_interval_seconds,
                max_age_minutes=settings.audio_generating_max_age_minutes,
            ),
            name="audio-reaper",
        )
    app.state.audio_reaper = reaper

    yield

    if reaper is not None:
        reaper.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await reaper

    await engine.dispose()
    logger.info("Service stopped")


def _openapi_with_bearer(app: FastAPI):
    def openapi():
        if app.openapi_schema is None:
            schema = get_openapi(
                title=app.title,
                version=app.version,
                description=app.description,
                routes=app.routes,
                tags=TAGS_METADATA,
            )
            schema.setdefault("components", {})["securitySchemes"] = {
                "BearerAuth": {"type": "http", "scheme": "bearer", "bearerFormat": "JWT"}
            }
            app.openapi_schema = schema
        return app.openapi_schema

    return openapi


def create_app() -> FastAPI:
    docs_enabled = settings.debug
    application = FastAPI(
        title=settings.app_title,
        description=settings.app_description,
        version=settings.app_version,
        openapi_tags=TAGS_METADATA,
        lifespan=lifespan,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
    )

    setup_request_id(application)
    setup_cors(application)

    application.include_router(api_v1_router, prefix="/api/v1")

    @application.get("/health", tags=["Health"])
    async def health_check():
        return {
            "status": "ok",
            "service": settings.app_title,
            "version": settings.app_version,
            "environment": settings.app_env,
        }

    for exc_class, handler in EXCEPTION_HANDLERS.items():
        application.add_exception_handler(exc_class, handler)

    application.openapi = _openapi_with_bearer(application)
    return application


app = create_app()
