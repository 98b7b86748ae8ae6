"""
AI Provider Abstract Base Classes
모든 AI 제공자가 구현해야 하는 인터페이스 정의
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Type, TypeVar

from pydantic import BaseModel

SchemaT = TypeVar("SchemaT", bound=BaseModel)


class TextProviderType(str, Enum):
    """텍스트 생성 제공자 타입"""

    GOOGLE = "google"


class SpeechProviderType(str, Enum):
    """음성 합성 제공자 타입"""

    HUME = "hume"


# ==================== Value Objects ====================


@dataclass(frozen=True)
class VoiceSpec:
    """
    합성 요청의 음성 지정

    voice_id(저장된 Provider 음성) 또는 description(자유 서술) 중 정확히 하나
    """

    voice_id: Optional[str] = None
    description: Optional[str] = None

    def __post_init__(self):
        if bool(self.voice_id) == bool(self.description):
            raise ValueError("VoiceSpec requires exactly one of voice_id or description")

    @classmethod
    def saved(cls, voice_id: str) -> "VoiceSpec":
        return cls(voice_id=voice_id)

    @classmethod
    def described(cls, description: str) -> "VoiceSpec":
        return cls(description=description)


@dataclass(frozen=True)
class SynthesisResult:
    """음성 합성 결과 (audio_base64: Provider가 반환한 base64 오디오)"""

    audio_base64: str
    generation_id: str


@dataclass(frozen=True)
class RegisteredVoice:
    """Provider에 등록된 영구 음성"""

    id: str
    name: str


# ==================== Text Generation Provider ====================


class TextGenerationProvider(ABC):
    """
    텍스트 생성 Provider 인터페이스

    구현체는 Provider SDK/HTTP 예외를 그대로 던지지 않고
    ProviderAuthenticationException / ProviderRequestException으로 변환해야 함
    """

    @abstractmethod
    async def generate_text(self, prompt: str) -> str:
        """
        자유 형식 텍스트 생성

        Args:
            prompt: 생성 프롬프트

        Returns:
            str: 생성된 텍스트
        """

    @abstractmethod
    async def generate_structured(self, prompt: str, schema: Type[SchemaT]) -> SchemaT:
        """
        스키마 기반 구조화 응답 생성

        Args:
            prompt: 생성 프롬프트
            schema: 응답 형태를 정의하는 pydantic 모델

        Returns:
            SchemaT: 스키마로 검증된 응답

        Raises:
            ProviderRequestException: 호출 실패 또는 스키마 불일치
        """


# ==================== Speech Synthesis Provider ====================


class SpeechSynthesisProvider(ABC):
    """
    음성 합성 Provider 인터페이스

    텍스트 낭독 생성, 생성 결과의 영구 음성 등록/삭제
    """

    @abstractmethod
    async def synthesize(self, text: str, voice: VoiceSpec) -> SynthesisResult:
        """
        텍스트를 음성으로 변환

        Args:
            text: 낭독할 텍스트
            voice: 저장된 음성 ID 또는 자유 서술

        Returns:
            SynthesisResult: base64 오디오 + generation_id
        """

    @abstractmethod
    async def register_voice(self, name: str, generation_id: str) -> RegisteredVoice:
        """
        합성 결과(generation_id)를 이름 있는 영구 음성으로 등록

        Raises:
            DuplicateVoiceNameException: 이미 사용 중인 이름
        """

    @abstractmethod
    async def delete_voice(self, voice: RegisteredVoice) -> None:
        """등록된 영구 음성 삭제"""
