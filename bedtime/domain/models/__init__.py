"""
ORM 모델 등록

Base.metadata에 모든 테이블이 올라가도록 import (alembic, create_all)
"""

from .user import User
from bedtime.features.children.models import ChildProfile
from bedtime.features.voice_presets.models import VoicePreset
from bedtime.features.stories.models import AudioStatus, Story

__all__ = ["User", "ChildProfile", "VoicePreset", "Story", "AudioStatus"]
