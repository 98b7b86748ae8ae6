"""
Process Step Tracing

서비스의 긴 작업(동화 생성, 낭독 음성 합성, 보이스 등록)에 붙이는 로깅 데코레이터.
중첩 호출은 들여쓰기로 보여준다.
"""

import contextvars
import functools
import time
from typing import Optional

from bedtime.core.logging import get_logger

logger = get_logger("bedtime.trace")

_depth = contextvars.ContextVar("log_process_depth", default=0)


def _indent(depth: int) -> str:
    if depth == 0:
        return ""
    return "│   " * (depth - 1) + "├── "


def log_process(step: str, desc: Optional[str] = None):
    """
    async 함수의 시작/완료/실패와 소요 시간을 남긴다. 예외는 그대로 전파한다.

    Usage:
        @log_process(step="synthesize", desc="동화 낭독 음성 생성")
        async def synthesize(self, ctx, story_id): ...
    """
    label = desc or step

    def decorator(func):
        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            depth = _depth.get()
            token = _depth.set(depth + 1)
            prefix = _indent(depth)
            log = logger.bind(process_step=step, func_name=func.__qualname__, depth=depth)
            started = time.perf_counter()

            log.info(f"{prefix}Start: {label}")
            try:
                result = await func(*args, **kwargs)
            except Exception as exc:
                log.warning(
                    f"{prefix}Failed: {label}",
                    duration_s=round(time.perf_counter() - started, 3),
                    error_type=type(exc).__name__,
                    error=str(exc),
                )
                raise
            else:
                log.info(
                    f"{prefix}Done: {label}",
                    duration_s=round(time.perf_counter() - started, 3),
                )
                return result
            finally:
                _depth.reset(token)

        return wrapper

    return decorator
