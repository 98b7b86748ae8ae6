"""
Storage Service Interface

DB에는 save()가 돌려준 경로만 저장하고, 응답을 만들 때 get_url()로 URL을 만든다.
경로 규칙:
    users/{user_id}/stories/{story_id}/{uuid}.wav   (낭독 음성, 합성마다 새 파일)
    users/{user_id}/voice_presets/{uuid}.wav       (보이스 샘플)
"""

from abc import ABC, abstractmethod
from typing import BinaryIO, Optional, Union


class AbstractStorageService(ABC):
    @abstractmethod
    async def save(
        self,
        file_data: Union[bytes, BinaryIO],
        path: str,
        content_type: Optional[str] = None,
    ) -> str:
        """같은 경로에 다시 저장하면 덮어쓴다. 반환값은 앞의 '/'를 뗀 경로"""

    @abstractmethod
    async def get(self, path: str) -> bytes:
        """Raises: FileNotFoundError"""

    @abstractmethod
    async def delete(self, path: str) -> bool:
        """
        원래 없던 파일이면 False.
        저장소 자체 오류는 그대로 전파하고 호출 측이 StorageFailed로 바꾼다.
        """

    @abstractmethod
    async def exists(self, path: str) -> bool:
        ...

    @abstractmethod
    def get_url(self, path: Optional[str]) -> Optional[str]:
        """path가 비어 있으면 None"""
