"""
AI Provider Implementations
"""

from .google_ai import GoogleAIProvider
from .hume_tts import HumeSpeechProvider

__all__ = ["GoogleAIProvider", "HumeSpeechProvider"]
