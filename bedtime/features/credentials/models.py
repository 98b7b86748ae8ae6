"""
Credential Kinds
사용자가 등록하는 Provider API 키 종류
"""

from enum import Enum


class CredentialKind(str, Enum):
    """
    API 키 종류

    users 테이블의 {kind}_api_key_ciphertext / {kind}_api_key_iv 컬럼에 대응
    """

    TEXT = "text"  # 아이디어/본문 생성 (Gemini)
    SPEECH = "speech"  # 낭독/보이스 프리셋 (Hume)

    @property
    def ciphertext_column(self) -> str:
        return f"{self.value}_api_key_ciphertext"

    @property
    def iv_column(self) -> str:
        return f"{self.value}_api_key_iv"
