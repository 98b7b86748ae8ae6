"""
Auth Service
회원가입, 로그인, 현재 사용자 조회
"""

from typing import Tuple

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ...core.auth.context import UserContext
from ...core.auth.exceptions import UnknownUserException
from ...core.auth.jwt_manager import JWTManager
from ...core.logging import get_logger
from ...core.security.passwords import PasswordHasher
from ...domain.models.user import User
from .exceptions import EmailAlreadyExistsException, InvalidCredentialsException
from .repository import UserRepository

logger = get_logger(__name__)


def normalize_email(email: str) -> str:
    """이메일은 대소문자 구분 없이 하나의 계정"""
    return email.strip().lower()


class AuthService:
    def __init__(
        self,
        user_repo: UserRepository,
        password_hasher: PasswordHasher,
        jwt_manager: JWTManager,
        db: AsyncSession,
    ):
        self.user_repo = user_repo
        self.password_hasher = password_hasher
        self.jwt_manager = jwt_manager
        self.db = db

    def _issue_token(self, user: User) -> str:
        return self.jwt_manager.create_access_token(
            data={"sub": str(user.id), "email": user.email}
        )

    async def register(self, email: str, password: str) -> Tuple[User, str]:
        """
        Raises:
            EmailAlreadyExistsException: 이미 가입된 이메일 (동시 가입 경합 포함)
        """
        email = normalize_email(email)
        if await self.user_repo.get_by_email(email) is not None:
            raise EmailAlreadyExistsException(email)

        try:
            user = await self.user_repo.create(
                email=email, password_hash=self.password_hasher.hash(password)
            )
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            raise EmailAlreadyExistsException(email)

        logger.info("User registered", user_id=str(user.id))
        return user, self._issue_token(user)

    async def login(self, email: str, password: str) -> Tuple[User, str]:
        """
        가입되지 않은 이메일과 틀린 비밀번호는 같은 예외, 비슷한 응답 시간

        Raises:
            InvalidCredentialsException
        """
        user = await self.user_repo.get_by_email(normalize_email(email))
        if user is None:
            self.password_hasher.burn(password)
            raise InvalidCredentialsException()

        ok, new_hash = self.password_hasher.verify_and_update(password, user.password_hash)
        if not ok:
            raise InvalidCredentialsException()

        if new_hash is not None:
            user.password_hash = new_hash
            await self.db.commit()
            logger.info("Password hash upgraded", user_id=str(user.id))

        return user, self._issue_token(user)

    async def get_me(self, ctx: UserContext) -> User:
        user = await self.user_repo.get(ctx.user_id)
        if user is None:
            raise UnknownUserException(str(ctx.user_id))
        return user
