"""
Story Domain Models
동화 ORM 모델 및 낭독 음성 상태
"""

import uuid
from datetime import datetime
from enum import Enum
from typing import Optional

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    DateTime,
    Enum as SQLEnum,
    ForeignKey,
    Index,
    String,
    Text,
    Uuid,
)
from sqlalchemy.orm import Mapped, mapped_column

from ...core.database.base import Base


class AudioStatus(str, Enum):
    """
    낭독 음성 상태

    pending → generating → ready | error
    error/ready → generating (재시도/재생성)
    """

    PENDING = "pending"
    GENERATING = "generating"
    READY = "ready"
    ERROR = "error"


# generating으로 전환 가능한 상태
STARTABLE_AUDIO_STATUSES = (AudioStatus.PENDING, AudioStatus.READY, AudioStatus.ERROR)


class Story(Base):
    """
    동화 모델

    child_id / voice_preset_id는 FK 없는 참조.
    원본 프로필/프리셋이 삭제돼도 child_name / voice_name 스냅샷은 남는다.
    """

    __tablename__ = "stories"
    __table_args__ = (
        CheckConstraint(
            "audio_status != 'ready' OR audio_storage_path IS NOT NULL",
            name="ready_has_audio",
        ),
        Index("ix_stories_user_id_created_at", "user_id", "created_at"),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)

    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)

    # 아이 (스냅샷)
    child_id: Mapped[Optional[uuid.UUID]] = mapped_column(Uuid, nullable=True, index=True)
    child_name: Mapped[str] = mapped_column(String(100), nullable=False)

    # 목소리 (스냅샷)
    voice_preset_id: Mapped[Optional[uuid.UUID]] = mapped_column(
        Uuid, nullable=True, index=True
    )
    voice_name: Mapped[str] = mapped_column(String(100), nullable=False)
    voice_description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # 낭독 음성
    audio_storage_path: Mapped[Optional[str]] = mapped_column(String(1024), nullable=True)
    audio_status: Mapped[AudioStatus] = mapped_column(
        SQLEnum(
            AudioStatus,
            name="audio_status",
            values_callable=lambda e: [m.value for m in e],
        ),
        default=AudioStatus.PENDING,
        nullable=False,
    )
    audio_status_updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, nullable=False
    )

    is_favorite: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, nullable=False
    )

    def __repr__(self) -> str:
        return f"<Story(id={self.id}, title={self.title}, audio_status={self.audio_status})>"
