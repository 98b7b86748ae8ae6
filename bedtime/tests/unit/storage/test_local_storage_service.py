"""
Local Storage Service Unit Tests
"""

import pytest

from bedtime.infrastructure.storage.local import LocalStorageService


class TestLocalStorageService:
    @pytest.fixture
    def service(self, tmp_path):
        return LocalStorageService(base_path=str(tmp_path), base_url="http://test/files/")

    @pytest.mark.asyncio
    async def test_save_and_get(self, service):
        path = await service.save(b"RIFF audio", "users/u1/stories/s1/a.wav", "audio/wav")

        assert path == "users/u1/stories/s1/a.wav"
        assert await service.exists(path)
        assert await service.get(path) == b"RIFF audio"

    @pytest.mark.asyncio
    async def test_save_strips_leading_slash(self, service):
        path = await service.save(b"data", "/voices/sample.wav")

        assert path == "voices/sample.wav"

    @pytest.mark.asyncio
    async def test_delete(self, service):
        await service.save(b"to delete", "delete_me.wav")

        assert await service.delete("delete_me.wav") is True
        assert not await service.exists("delete_me.wav")

    @pytest.mark.asyncio
    async def test_delete_missing(self, service):
        assert await service.delete("missing.wav") is False

    @pytest.mark.asyncio
    async def test_get_not_found(self, service):
        with pytest.raises(FileNotFoundError):
            await service.get("missing.wav")

    @pytest.mark.asyncio
    async def test_path_traversal_rejected(self, service):
        with pytest.raises(ValueError):
            await service.get("../../etc/passwd")

    def test_get_url(self, service):
        assert service.get_url("users/u1/a.wav") == "http://test/files/users/u1/a.wav"
        assert service.get_url(None) is None
        assert service.get_url("") is None

    @pytest.mark.asyncio
    async def test_save_overwrites_without_leftover_parts(self, service, tmp_path):
        await service.save(b"first", "stories/s1/a.wav")
        await service.save(b"second", "stories/s1/a.wav")

        assert await service.get("stories/s1/a.wav") == b"second"
        assert [p.name for p in (tmp_path / "stories" / "s1").iterdir()] == ["a.wav"]
