"""
AI Infrastructure Module
AI Provider 추상화 계층
"""

from .base import (
    RegisteredVoice,
    SpeechProviderType,
    SpeechSynthesisProvider,
    SynthesisResult,
    TextGenerationProvider,
    TextProviderType,
    VoiceSpec,
)

__all__ = [
    "RegisteredVoice",
    "SpeechProviderType",
    "SpeechSynthesisProvider",
    "SynthesisResult",
    "TextGenerationProvider",
    "TextProviderType",
    "VoiceSpec",
]
