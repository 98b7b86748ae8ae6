"""
Security Module
API 키 암호화, 비밀번호 해싱
"""

from .cipher import EncryptedSecret, SecretCipher, get_secret_cipher
from .passwords import PasswordHasher

__all__ = ["EncryptedSecret", "PasswordHasher", "SecretCipher", "get_secret_cipher"]
