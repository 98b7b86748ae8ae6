"""
Password Hashing

passlib CryptContext(Argon2id). 파라미터를 올리면 기존 해시는 다음 로그인 때
verify_and_update()가 새 해시를 돌려주고, 서비스가 그것으로 교체한다.
"""

from typing import Optional, Tuple

from passlib.context import CryptContext


class PasswordHasher:
    context = CryptContext(
        schemes=["argon2"],
        argon2__rounds=4,
        argon2__memory_cost=65536,  # KiB
    )

    # 존재하지 않는 이메일로 로그인할 때도 같은 비용의 검증을 수행하기 위한 해시
    _dummy_hash: Optional[str] = None

    @classmethod
    def hash(cls, password: str) -> str:
        return cls.context.hash(password)

    @classmethod
    def verify(cls, password: str, password_hash: str) -> bool:
        return cls.context.verify(password, password_hash)

    @classmethod
    def verify_and_update(
        cls, password: str, password_hash: str
    ) -> Tuple[bool, Optional[str]]:
        """(일치 여부, 교체할 새 해시 또는 None)"""
        return cls.context.verify_and_update(password, password_hash)

    @classmethod
    def burn(cls, password: str) -> None:
        """사용자 없음 경로에서 시간 차이로 가입 여부가 드러나지 않도록 더미 검증"""
        if cls._dummy_hash is None:
            cls._dummy_hash = cls.context.hash("bedtime-dummy-password")
        cls.context.verify(password, cls._dummy_hash)
