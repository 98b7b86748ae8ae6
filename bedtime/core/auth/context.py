"""
User Context
서비스 호출마다 명시적으로 전달되는 요청 사용자 정보
"""

import uuid
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class UserContext:
    """
    인증된 요청의 사용자 컨텍스트

    전역/암묵적 "현재 사용자" 대신 모든 서비스 메서드의 첫 인자로 전달.

    Attributes:
        user_id: 사용자 UUID (JWT sub)
        email: 사용자 이메일 (로그용)
    """

    user_id: uuid.UUID
    email: Optional[str] = None

    def owns(self, owner_id: uuid.UUID) -> bool:
        """리소스 소유자 여부"""
        return self.user_id == owner_id
