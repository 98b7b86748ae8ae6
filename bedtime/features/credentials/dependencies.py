"""
Credential Dependencies
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ...core.database.session import get_db
from ...core.security.cipher import SecretCipher, get_secret_cipher
from ..auth.repository import UserRepository
from .service import CredentialService


def get_credential_service(
    db: AsyncSession = Depends(get_db),
    cipher: SecretCipher = Depends(get_secret_cipher),
) -> CredentialService:
    """CredentialService 의존성 주입"""
    return CredentialService(
        user_repo=UserRepository(db),
        cipher=cipher,
        db_session=db,
    )
