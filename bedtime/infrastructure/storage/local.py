"""
Local Storage Service

STORAGE_BASE_PATH 아래에 파일을 두고 /api/v1/files/{path}로 제공한다.
개발/테스트 환경 기본값.
"""

import os
import uuid
from pathlib import Path
from typing import BinaryIO, Optional, Union

import aiofiles
import aiofiles.os

from ...core.config import settings
from .base import AbstractStorageService


class LocalStorageService(AbstractStorageService):
    def __init__(self, base_path: Optional[str] = None, base_url: Optional[str] = None):
        self.base_path = Path(base_path or settings.storage_base_path).resolve()
        self.base_url = (base_url or settings.storage_base_url).rstrip("/")
        self.base_path.mkdir(parents=True, exist_ok=True)

    def _resolve(self, path: str) -> Path:
        """저장소 루트 밖(../ 등)을 가리키면 ValueError"""
        resolved = (self.base_path / path.lstrip("/")).resolve()
        if not resolved.is_relative_to(self.base_path):
            raise ValueError(f"Path escapes storage root: {path}")
        return resolved

    async def save(
        self,
        file_data: Union[bytes, BinaryIO],
        path: str,
        content_type: Optional[str] = None,
    ) -> str:
        """
        임시 파일에 쓴 뒤 os.replace로 교체한다.
        같은 경로를 다시 저장하면(재합성) 이전 파일을 덮어쓴다.
        """
        target = self._resolve(path)
        target.parent.mkdir(parents=True, exist_ok=True)

        data = file_data if isinstance(file_data, bytes) else file_data.read()
        if isinstance(data, str):
            data = data.encode("utf-8")

        tmp = target.with_name(f".{target.name}.{uuid.uuid4().hex}.part")
        try:
            async with aiofiles.open(tmp, "wb") as f:
                await f.write(data)
            os.replace(tmp, target)
        finally:
            if tmp.exists():
                await aiofiles.os.remove(tmp)

        return path.lstrip("/")

    async def get(self, path: str) -> bytes:
        target = self._resolve(path)
        if not target.is_file():
            raise FileNotFoundError(f"File not found: {path}")
        async with aiofiles.open(target, "rb") as f:
            return await f.read()

    async def delete(self, path: str) -> bool:
        target = self._resolve(path)
        if not target.is_file():
            return False
        await aiofiles.os.remove(target)
        return True

    async def exists(self, path: str) -> bool:
        return self._resolve(path).is_file()

    def get_url(self, path: Optional[str]) -> Optional[str]:
        if not path:
            return None
        return f"{self.base_url}/{path.lstrip('/')}"
