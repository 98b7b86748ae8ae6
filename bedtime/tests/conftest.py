"""
Pytest Configuration and Fixtures
테스트용 Fixture 정의
"""

import os
import tempfile

# bedtime 모듈 import 전에 테스트 환경 설정
os.environ.setdefault("APP_ENV", "testing")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("STORAGE_PROVIDER", "local")
os.environ.setdefault("STORAGE_BASE_PATH", tempfile.mkdtemp(prefix="bedtime-test-"))
os.environ.setdefault("AUDIO_REAPER_ENABLED", "false")

import base64
from typing import AsyncGenerator
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from bedtime.core.auth.context import UserContext
from bedtime.core.database.base import Base
from bedtime.core.security.cipher import SecretCipher
from bedtime.domain import models  # noqa: F401
from bedtime.domain.models.user import User
from bedtime.features.auth.repository import UserRepository
from bedtime.features.children.repository import ChildProfileRepository
from bedtime.features.children.service import ChildProfileService
from bedtime.features.credentials.models import CredentialKind
from bedtime.features.credentials.service import CredentialService
from bedtime.features.stories.models import AudioStatus, Story
from bedtime.features.stories.repository import StoryRepository
from bedtime.features.voice_presets.repository import VoicePresetRepository
from bedtime.features.voice_presets.service import VoicePresetService
from bedtime.infrastructure.ai.base import RegisteredVoice, SynthesisResult
from bedtime.infrastructure.storage.base import AbstractStorageService

TEST_CREDENTIAL_SECRET = "test-credential-secret-at-least-32-characters"

FAKE_AUDIO = b"RIFF....WAVEfmt fake audio"
FAKE_AUDIO_BASE64 = base64.b64encode(FAKE_AUDIO).decode("ascii")


@pytest.fixture
async def db_engine():
    """테스트마다 새 in-memory SQLite (StaticPool로 단일 커넥션 공유)"""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return async_sessionmaker(
        db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """테스트용 데이터베이스 세션"""
    async with session_factory() as session:
        yield session


async def _create_user(session: AsyncSession, email: str) -> User:
    user = User(email=email, password_hash="not-a-real-hash")
    session.add(user)
    await session.commit()
    return user


@pytest.fixture
async def user(db_session) -> User:
    return await _create_user(db_session, "parent@example.com")


@pytest.fixture
async def other_user(db_session) -> User:
    return await _create_user(db_session, "stranger@example.com")


@pytest.fixture
def ctx(user) -> UserContext:
    return UserContext(user_id=user.id, email=user.email)


@pytest.fixture
def other_ctx(other_user) -> UserContext:
    return UserContext(user_id=other_user.id, email=other_user.email)


@pytest.fixture
def cipher() -> SecretCipher:
    return SecretCipher(TEST_CREDENTIAL_SECRET)


@pytest.fixture
def credential_service(db_session, cipher) -> CredentialService:
    return CredentialService(
        user_repo=UserRepository(db_session),
        cipher=cipher,
        db_session=db_session,
    )


@pytest.fixture
async def with_text_key(ctx, credential_service):
    """텍스트 생성 API 키 등록"""
    await credential_service.store_credential(ctx, CredentialKind.TEXT, "google-key")


@pytest.fixture
async def with_speech_key(ctx, credential_service):
    """음성 합성 API 키 등록"""
    await credential_service.store_credential(ctx, CredentialKind.SPEECH, "hume-key")


# ==================== Provider / Storage Mocks ====================


@pytest.fixture
def mock_text_provider():
    """Mock Text Provider"""
    provider = MagicMock()
    provider.generate_text = AsyncMock(return_value="Once upon a time...\n\nThe end.")
    provider.generate_structured = AsyncMock()
    return provider


@pytest.fixture
def mock_speech_provider():
    """Mock Speech Provider"""
    provider = MagicMock()
    provider.synthesize = AsyncMock(
        return_value=SynthesisResult(audio_base64=FAKE_AUDIO_BASE64, generation_id="gen-123")
    )
    provider.register_voice = AsyncMock(
        side_effect=lambda name, generation_id: RegisteredVoice(id=f"voice-{name}", name=name)
    )
    provider.delete_voice = AsyncMock(return_value=None)
    return provider


@pytest.fixture
def mock_ai_factory(mock_text_provider, mock_speech_provider):
    """Mock AI Factory"""
    factory = MagicMock()
    factory.get_text_provider = MagicMock(return_value=mock_text_provider)
    factory.get_speech_provider = MagicMock(return_value=mock_speech_provider)
    return factory


@pytest.fixture
def mock_storage_service():
    """Mock Storage Service (save는 전달받은 경로를 그대로 반환)"""
    storage = MagicMock(spec=AbstractStorageService)
    storage.save = AsyncMock(side_effect=lambda data, path, content_type=None: path)
    storage.get = AsyncMock(return_value=FAKE_AUDIO)
    storage.delete = AsyncMock(return_value=True)
    storage.exists = AsyncMock(return_value=True)
    storage.get_url = MagicMock(
        side_effect=lambda path: f"http://test/files/{path}" if path else None
    )
    return storage


# ==================== Domain Services ====================


@pytest.fixture
def child_service(db_session):
    return ChildProfileService(ChildProfileRepository(db_session), db_session)


@pytest.fixture
def preset_service(db_session, mock_storage_service):
    return VoicePresetService(
        preset_repo=VoicePresetRepository(db_session),
        storage_service=mock_storage_service,
        db_session=db_session,
    )


@pytest.fixture
def story_repo(db_session):
    return StoryRepository(db_session)


@pytest.fixture
async def child(ctx, child_service):
    return await child_service.create(ctx, name="Mia", age=5, interests="dinosaurs")


@pytest.fixture
async def preset(ctx, db_session):
    """Provider 등록이 끝난 보이스 프리셋"""
    preset = await VoicePresetRepository(db_session).create(
        user_id=ctx.user_id,
        name="Grandma",
        description="A warm, slow grandmother voice",
        provider_voice_id="voice-Grandma",
        provider_voice_name="Grandma",
        sample_audio_path=f"users/{ctx.user_id}/voice_presets/sample.wav",
    )
    await db_session.commit()
    return preset


@pytest.fixture
def make_story(ctx, story_repo, db_session):
    """동화 생성 헬퍼 (기본값: pending, 직접 입력 목소리)"""

    async def _make_story(owner: UserContext = None, **overrides) -> Story:
        owner = owner or ctx
        fields = dict(
            user_id=owner.user_id,
            title="The Sleepy Moon Dinosaur",
            content="Once upon a time a little dinosaur looked at the moon.",
            child_name="Mia",
            voice_name="Calm narrator",
            voice_description="A calm, warm narrator",
            audio_status=AudioStatus.PENDING,
        )
        fields.update(overrides)
        story = await story_repo.create(**fields)
        await db_session.commit()
        return story

    return _make_story
