"""
Google AI Provider
Google Gemini를 사용한 동화 아이디어/본문 생성
"""

import logging
from typing import Optional, Type

from google import genai
from google.genai import errors as genai_errors
from google.genai import types
from pydantic import ValidationError

from ..base import SchemaT, TextGenerationProvider
from ..exceptions import ProviderAuthenticationException, ProviderRequestException
from ....core.config import settings

logger = logging.getLogger(__name__)

PROVIDER_NAME = "Google Gemini"


class GoogleAIProvider(TextGenerationProvider):
    """
    Google AI (Gemini) Provider

    사용자별 API 키로 클라이언트를 생성한다.
    """

    def __init__(self, api_key: str, model: Optional[str] = None):
        """
        Args:
            api_key: 사용자 Google API Key
            model: 모델 이름 (기본값: settings.text_model)
        """
        self.api_key = api_key
        self.model = model or settings.text_model
        self.client = genai.Client(api_key=self.api_key)

    async def _generate(
        self, prompt: str, config: Optional[types.GenerateContentConfig] = None
    ) -> str:
        try:
            response = await self.client.aio.models.generate_content(
                model=self.model,
                contents=prompt,
                config=config,
            )
        except genai_errors.APIError as e:
            if e.code in (401, 403) or "API key" in (e.message or ""):
                raise ProviderAuthenticationException(PROVIDER_NAME, reason=e.message)
            raise ProviderRequestException(
                PROVIDER_NAME, reason=e.message or str(e), status_code=e.code
            )
        except Exception as e:
            # SDK 내부 전송 오류 (httpx 등)
            logger.error(f"Gemini request failed: {e!r}")
            raise ProviderRequestException(PROVIDER_NAME, reason=str(e) or repr(e))

        text = response.text
        if not text or not text.strip():
            raise ProviderRequestException(PROVIDER_NAME, reason="empty response")
        return text

    async def generate_text(self, prompt: str) -> str:
        return await self._generate(prompt)

    async def generate_structured(self, prompt: str, schema: Type[SchemaT]) -> SchemaT:
        config = types.GenerateContentConfig(
            response_mime_type="application/json",
            response_schema=schema,
        )
        text = await self._generate(prompt, config)

        try:
            return schema.model_validate_json(text)
        except ValidationError as e:
            raise ProviderRequestException(
                PROVIDER_NAME, reason=f"response does not match schema: {e.error_count()} errors"
            )
