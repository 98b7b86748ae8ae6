"""
Secret Cipher
Provider API 키 저장용 AES-256-GCM 암호화
"""

import hashlib
import os
from dataclasses import dataclass
from functools import lru_cache

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from ..config import settings

IV_LENGTH = 12


@dataclass(frozen=True)
class EncryptedSecret:
    """암호문 + IV 쌍 (users 테이블의 *_ciphertext / *_iv 컬럼)"""

    ciphertext: bytes
    iv: bytes


class DecryptionError(ValueError):
    """복호화 실패 (키 불일치, 손상된 암호문)"""


class SecretCipher:
    """
    프로세스 공용 Secret 기반 대칭 암호화

    - 키: SHA-256(secret) → 32 bytes (AES-256)
    - IV: 암호화마다 12 bytes 난수
    """

    def __init__(self, secret: str):
        self._aesgcm = AESGCM(hashlib.sha256(secret.encode("utf-8")).digest())

    def encrypt(self, plaintext: str) -> EncryptedSecret:
        iv = os.urandom(IV_LENGTH)
        ciphertext = self._aesgcm.encrypt(iv, plaintext.encode("utf-8"), None)
        return EncryptedSecret(ciphertext=ciphertext, iv=iv)

    def decrypt(self, secret: EncryptedSecret) -> str:
        """
        Raises:
            DecryptionError: 인증 태그 불일치 또는 IV 길이 오류
        """
        if len(secret.iv) != IV_LENGTH:
            raise DecryptionError("invalid initialization vector length")
        try:
            plaintext = self._aesgcm.decrypt(secret.iv, secret.ciphertext, None)
        except InvalidTag as e:
            raise DecryptionError("ciphertext authentication failed") from e
        return plaintext.decode("utf-8")


@lru_cache()
def get_secret_cipher() -> SecretCipher:
    """SecretCipher 의존성 (settings.credential_encryption_secret)"""
    return SecretCipher(settings.credential_encryption_secret)
