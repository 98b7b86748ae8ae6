"""
User Model
"""

import uuid
from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, LargeBinary, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from bedtime.core.database.base import Base


class User(Base):
    """
    계정 + Provider API 키 저장소

    API 키는 kind(text, speech)별로 ciphertext/iv 두 컬럼에 AES-GCM으로 보관한다.
    두 컬럼은 항상 함께 채워지거나 함께 비어 있다(CredentialService가 보장).
    """

    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    # AuthService가 소문자로 정규화해 저장
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    password_hash: Mapped[str] = mapped_column(String(255))

    text_api_key_ciphertext: Mapped[Optional[bytes]] = mapped_column(LargeBinary)
    text_api_key_iv: Mapped[Optional[bytes]] = mapped_column(LargeBinary)
    speech_api_key_ciphertext: Mapped[Optional[bytes]] = mapped_column(LargeBinary)
    speech_api_key_iv: Mapped[Optional[bytes]] = mapped_column(LargeBinary)

    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow
    )

    def __repr__(self) -> str:
        return f"<User {self.id} {self.email}>"
