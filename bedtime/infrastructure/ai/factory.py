"""
AI Provider Factory
설정에 따라 적절한 AI Provider 인스턴스를 생성
"""

from functools import lru_cache
from typing import Optional

from ...core.config import settings
from .base import (
    SpeechProviderType,
    SpeechSynthesisProvider,
    TextGenerationProvider,
    TextProviderType,
)
from .providers.google_ai import GoogleAIProvider
from .providers.hume_tts import HumeSpeechProvider


class AIProviderFactory:
    """
    AI Provider Factory

    Provider API 키는 사용자별로 저장되므로 호출 시마다 전달받는다.
    """

    @staticmethod
    def get_text_provider(
        api_key: str, provider_type: Optional[str] = None
    ) -> TextGenerationProvider:
        """텍스트 생성 Provider 반환"""
        ptype = provider_type or settings.ai_text_provider

        if ptype == TextProviderType.GOOGLE:
            return GoogleAIProvider(api_key=api_key)
        raise ValueError(f"Unsupported text provider: {ptype}")

    @staticmethod
    def get_speech_provider(
        api_key: str, provider_type: Optional[str] = None
    ) -> SpeechSynthesisProvider:
        """음성 합성 Provider 반환"""
        ptype = provider_type or settings.ai_speech_provider

        if ptype == SpeechProviderType.HUME:
            return HumeSpeechProvider(api_key=api_key)
        raise ValueError(f"Unsupported speech provider: {ptype}")


@lru_cache()
def get_ai_factory() -> AIProviderFactory:
    """Factory 싱글톤 반환"""
    return AIProviderFactory()
