"""
Voice Preset Repository
"""

from ...domain.repositories.base import OwnedRepository
from .models import VoicePreset


class VoicePresetRepository(OwnedRepository[VoicePreset]):
    """보이스 프리셋 Repository"""

    model = VoicePreset
