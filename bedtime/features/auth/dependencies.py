"""
Auth Dependencies
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ...core.auth.jwt_manager import JWTManager
from ...core.database.session import get_db
from ...core.security.passwords import PasswordHasher
from .repository import UserRepository
from .service import AuthService


def get_auth_service(db: AsyncSession = Depends(get_db)) -> AuthService:
    """AuthService 의존성 주입"""
    return AuthService(
        user_repo=UserRepository(db),
        password_hasher=PasswordHasher(),
        jwt_manager=JWTManager(),
        db=db,
    )
