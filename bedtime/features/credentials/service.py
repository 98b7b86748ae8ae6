"""
Credential Service
사용자별 Provider API 키 암호화 저장/조회
"""

import logging
from datetime import datetime
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from ...core.auth.context import UserContext
from ...core.auth.exceptions import UnknownUserException
from ...core.security.cipher import DecryptionError, EncryptedSecret, SecretCipher
from ..auth.repository import UserRepository
from .exceptions import InvalidCredentialException, MissingCredentialException
from .models import CredentialKind
from .schemas import CredentialStatusResponse

logger = logging.getLogger(__name__)


class CredentialService:
    """
    Secret Store

    평문 API 키는 저장하지 않으며 로그에도 남기지 않는다.
    """

    def __init__(
        self,
        user_repo: UserRepository,
        cipher: SecretCipher,
        db_session: AsyncSession,
    ):
        self.user_repo = user_repo
        self.cipher = cipher
        self.db_session = db_session

    async def _get_user(self, ctx: UserContext):
        user = await self.user_repo.get(ctx.user_id)
        if user is None:
            raise UnknownUserException(str(ctx.user_id))
        return user

    async def store_credential(
        self, ctx: UserContext, kind: CredentialKind, api_key: str
    ) -> None:
        """API 키 암호화 저장 (기존 키 교체)"""
        user = await self._get_user(ctx)
        encrypted = self.cipher.encrypt(api_key.strip())

        setattr(user, kind.ciphertext_column, encrypted.ciphertext)
        setattr(user, kind.iv_column, encrypted.iv)
        user.updated_at = datetime.utcnow()

        await self.db_session.commit()
        logger.info(
            "Credential stored",
            extra={"user_id": str(ctx.user_id), "kind": kind.value},
        )

    async def get_credential(
        self, ctx: UserContext, kind: CredentialKind
    ) -> Optional[str]:
        """
        복호화된 API 키 반환

        Returns:
            Optional[str]: 등록되지 않았으면 None

        Raises:
            InvalidCredentialException: 복호화 실패 (암호화 Secret 변경 등)
        """
        user = await self._get_user(ctx)
        ciphertext = getattr(user, kind.ciphertext_column)
        iv = getattr(user, kind.iv_column)
        if not ciphertext or not iv:
            return None

        try:
            return self.cipher.decrypt(EncryptedSecret(ciphertext=ciphertext, iv=iv))
        except DecryptionError as e:
            logger.error(
                "Credential decryption failed",
                extra={"user_id": str(ctx.user_id), "kind": kind.value},
            )
            raise InvalidCredentialException(kind, reason=str(e))

    async def require_credential(self, ctx: UserContext, kind: CredentialKind) -> str:
        """
        복호화된 API 키 반환 (필수)

        Raises:
            MissingCredentialException: 등록되지 않음
            InvalidCredentialException: 복호화 실패
        """
        api_key = await self.get_credential(ctx, kind)
        if not api_key:
            raise MissingCredentialException(kind)
        return api_key

    async def get_status(self, ctx: UserContext) -> CredentialStatusResponse:
        """API 키 등록 여부 조회"""
        user = await self._get_user(ctx)
        return CredentialStatusResponse(
            text=bool(user.text_api_key_ciphertext),
            speech=bool(user.speech_api_key_ciphertext),
        )
