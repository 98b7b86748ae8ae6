"""
Child Profile Repository
"""

from ...domain.repositories.base import OwnedRepository
from .models import ChildProfile


class ChildProfileRepository(OwnedRepository[ChildProfile]):
    """아이 프로필 Repository (소유자 범위 조회는 OwnedRepository 제공)"""

    model = ChildProfile
