"""
Core Logging Configuration

structlog 설정. 표준 logging으로 남긴 로그(logger.warning(..., extra=...))도
같은 프로세서 체인을 거쳐 콘솔/JSON으로 렌더링된다.

API 키나 토큰이 extra/bind 값으로 섞여 들어와도 출력 전에 가린다.
"""

import logging
import sys
from typing import Any, Dict, List

import structlog
from asgi_correlation_id import correlation_id

from bedtime.core.config import settings

# 값이 그대로 찍히면 안 되는 키
SENSITIVE_KEYS = frozenset(
    {
        "api_key",
        "plaintext",
        "password",
        "authorization",
        "access_token",
        "refresh_token",
        "encrypted_key",
    }
)

_NOISY_LOGGERS = {
    "httpx": logging.WARNING,
    "httpcore": logging.WARNING,
    "botocore": logging.WARNING,
    "google_genai": logging.WARNING,
}


def add_request_id(logger: Any, method_name: str, event_dict: Dict[str, Any]):
    request_id = correlation_id.get()
    if request_id:
        event_dict.setdefault("request_id", request_id)
    return event_dict


def redact_secrets(logger: Any, method_name: str, event_dict: Dict[str, Any]):
    for key in SENSITIVE_KEYS.intersection(event_dict):
        event_dict[key] = "***"
    return event_dict


def _shared_processors() -> List[Any]:
    return [
        structlog.contextvars.merge_contextvars,
        add_request_id,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.stdlib.ExtraAdder(),
        redact_secrets,
        structlog.processors.TimeStamper(fmt="iso" if settings.log_json_format else "%H:%M:%S"),
        structlog.processors.StackInfoRenderer(),
    ]


def configure_logging() -> None:
    """앱 시작 시 한 번 호출 (main.py)"""
    shared = _shared_processors()

    structlog.configure(
        processors=shared + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    if settings.log_json_format:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(settings.log_level.upper())

    # uvicorn/sqlalchemy 로그도 루트 핸들러로 모은다
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access", "sqlalchemy.engine"):
        lib_logger = logging.getLogger(name)
        lib_logger.handlers = []
        lib_logger.propagate = True

    for name, level in _NOISY_LOGGERS.items():
        logging.getLogger(name).setLevel(level)


def get_logger(name: str = None) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)
