"""
Storage Module
로컬/S3 파일 저장소
"""

from .base import AbstractStorageService
from .dependencies import get_storage_service

__all__ = ["AbstractStorageService", "get_storage_service"]
