"""
Voice Preset Model
보이스 프리셋 ORM 모델
"""

import uuid
from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from ...core.database.base import Base


class VoicePreset(Base):
    """
    보이스 프리셋

    Attributes:
        name: 사용자에게 보이는 이름 (수정 가능)
        description: 음성 자유 서술 (샘플 합성에 사용)
        provider_voice_id: Provider에 등록된 음성 ID (낭독 시 사용)
        provider_voice_name: Provider 등록 이름 (삭제 시 사용, 변경 불가)
        sample_audio_path: 샘플 음성 저장 경로
    """

    __tablename__ = "voice_presets"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)

    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)

    provider_voice_id: Mapped[str] = mapped_column(String(255), nullable=False)
    provider_voice_name: Mapped[str] = mapped_column(String(255), nullable=False)
    sample_audio_path: Mapped[str] = mapped_column(String(1024), nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, nullable=False
    )

    def __repr__(self) -> str:
        return f"<VoicePreset(id={self.id}, name={self.name})>"
