"""
Audio Reaper Scheduled Task
generating 상태로 오래 멈춘 동화를 error로 정리
"""

import asyncio
from datetime import timedelta

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from bedtime.core.database.session import AsyncSessionLocal
from bedtime.core.logging import get_logger
from bedtime.features.stories.repository import StoryRepository

logger = get_logger(__name__)


async def sweep_stale_generating(session: AsyncSession, max_age_minutes: int) -> int:
    """
    max_age_minutes보다 오래 generating인 동화를 error로 전환

    프로세스 재시작 등으로 합성이 중단된 동화는 사용자가 재시도할 수 있게 된다.

    Returns:
        int: 전환된 동화 수
    """
    repo = StoryRepository(session)
    swept = await repo.sweep_stale_generating(timedelta(minutes=max_age_minutes))
    await session.commit()

    if swept:
        logger.warning(
            "Stale generating stories marked as error",
            count=swept,
            max_age_minutes=max_age_minutes,
        )
    return swept


async def sweep_stale_audio_periodically(
    interval: int = 60,  # 1분마다 실행
    max_age_minutes: int = 30,
):
    """
    주기적으로 stale generating 정리

    Args:
        interval: 실행 간격 (초)
        max_age_minutes: generating 최대 유지 시간 (분), 합성 타임아웃보다 충분히 커야 함
    """
    logger.info("Audio reaper started", interval=interval, max_age_minutes=max_age_minutes)

    while True:
        try:
            await asyncio.sleep(interval)

            async with AsyncSessionLocal() as session:
                try:
                    await sweep_stale_generating(session, max_age_minutes)
                except SQLAlchemyError as e:
                    await session.rollback()
                    logger.error("Audio reaper sweep failed", error=str(e), exc_info=True)

        except asyncio.CancelledError:
            logger.info("Audio reaper cancelled")
            raise
