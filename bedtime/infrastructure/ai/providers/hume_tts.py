"""
Hume TTS Provider
Hume Octave TTS REST API를 사용한 음성 합성 및 음성 등록
"""

import logging
from typing import Any, List, Optional

import httpx
from pydantic import BaseModel, ValidationError

from ..base import RegisteredVoice, SpeechSynthesisProvider, SynthesisResult, VoiceSpec
from ..exceptions import ProviderRequestException
from .hume_errors import PROVIDER_NAME, decode_error
from ....core.config import settings

logger = logging.getLogger(__name__)


class _Generation(BaseModel):
    audio: str
    generation_id: str


class _SynthesisResponse(BaseModel):
    generations: List[_Generation]


class _VoiceResponse(BaseModel):
    id: str
    name: str


class HumeSpeechProvider(SpeechSynthesisProvider):
    """
    Hume TTS Provider

    - POST   /tts          : 음성 합성 (base64 WAV)
    - POST   /tts/voices   : generation_id → 이름 있는 음성 등록
    - DELETE /tts/voices   : 이름으로 음성 삭제
    """

    def __init__(
        self,
        api_key: str,
        base_url: Optional[str] = None,
        timeout: Optional[httpx.Timeout] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Args:
            api_key: 사용자 Hume API 키
            base_url: API 기본 URL (기본값: settings.hume_api_url)
            timeout: HTTP 타임아웃 (기본값: 긴 read timeout)
            transport: httpx transport (테스트에서 MockTransport 주입)
        """
        self.api_key = api_key
        self.base_url = (base_url or settings.hume_api_url).rstrip("/")
        # 긴 동화 합성은 수 분이 걸리므로 read timeout을 길게
        self.timeout = timeout or httpx.Timeout(
            settings.http_timeout, read=settings.speech_synthesis_timeout
        )
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            headers={"X-Hume-Api-Key": self.api_key},
            timeout=self.timeout,
            transport=self._transport,
        )

    async def _request(
        self,
        method: str,
        path: str,
        voice_name: Optional[str] = None,
        **kwargs: Any,
    ) -> httpx.Response:
        try:
            async with self._client() as client:
                response = await client.request(method, path, **kwargs)
        except httpx.TimeoutException as e:
            raise ProviderRequestException(PROVIDER_NAME, reason=f"timeout: {e!r}")
        except httpx.HTTPError as e:
            raise ProviderRequestException(PROVIDER_NAME, reason=str(e) or repr(e))

        if response.is_error:
            try:
                body = response.json()
            except ValueError:
                body = None
            logger.warning(
                f"Hume API error: {method} {path} -> {response.status_code}",
                extra={"status_code": response.status_code, "body": body},
            )
            raise decode_error(response.status_code, body, voice_name=voice_name)

        return response

    async def synthesize(self, text: str, voice: VoiceSpec) -> SynthesisResult:
        utterance = {"text": text}
        if voice.voice_id:
            utterance["voice"] = {"id": voice.voice_id}
        else:
            utterance["description"] = voice.description

        response = await self._request(
            "POST",
            "/tts",
            json={"utterances": [utterance], "format": {"type": "wav"}},
        )

        try:
            parsed = _SynthesisResponse.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise ProviderRequestException(PROVIDER_NAME, reason=f"malformed response: {e}")

        if not parsed.generations:
            raise ProviderRequestException(PROVIDER_NAME, reason="no generations returned")

        generation = parsed.generations[0]
        return SynthesisResult(
            audio_base64=generation.audio,
            generation_id=generation.generation_id,
        )

    async def register_voice(self, name: str, generation_id: str) -> RegisteredVoice:
        response = await self._request(
            "POST",
            "/tts/voices",
            voice_name=name,
            json={"name": name, "generation_id": generation_id},
        )

        try:
            parsed = _VoiceResponse.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise ProviderRequestException(PROVIDER_NAME, reason=f"malformed response: {e}")

        return RegisteredVoice(id=parsed.id, name=parsed.name)

    async def delete_voice(self, voice: RegisteredVoice) -> None:
        # Hume은 음성 삭제를 이름 기준으로 처리
        await self._request("DELETE", "/tts/voices", params={"name": voice.name})
