from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ...core.database.session import get_db
from .repository import ChildProfileRepository
from .service import ChildProfileService


def get_child_profile_service(db: AsyncSession = Depends(get_db)) -> ChildProfileService:
    """ChildProfileService 의존성 주입"""
    return ChildProfileService(child_repo=ChildProfileRepository(db), db_session=db)
