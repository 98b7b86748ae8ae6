"""
Child Profile Model
아이 프로필 ORM 모델
"""

import uuid
from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from ...core.database.base import Base


class ChildProfile(Base):
    """
    아이 프로필

    동화 아이디어/본문 프롬프트에 이름, 나이, 관심사가 들어간다.
    삭제해도 이 프로필로 만든 동화는 남는다 (stories.child_id는 FK 없음).
    """

    __tablename__ = "child_profiles"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)

    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    age: Mapped[int] = mapped_column(Integer, nullable=False)
    interests: Mapped[str] = mapped_column(Text, nullable=False, default="")

    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, nullable=False
    )

    def __repr__(self) -> str:
        return f"<ChildProfile(id={self.id}, name={self.name})>"
