"""
Storage Dependencies
설정에 따른 스토리지 구현체 선택
"""

from functools import lru_cache

from ...core.config import settings
from .base import AbstractStorageService


@lru_cache()
def get_storage_service() -> AbstractStorageService:
    """스토리지 서비스 의존성 (STORAGE_PROVIDER=local|s3)"""
    if settings.storage_provider == "s3":
        from .s3 import S3StorageService

        return S3StorageService()

    from .local import LocalStorageService

    return LocalStorageService()
