"""
Story Dependencies
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ...core.database.session import get_db
from ...infrastructure.ai.factory import AIProviderFactory, get_ai_factory
from ...infrastructure.storage.base import AbstractStorageService
from ...infrastructure.storage.dependencies import get_storage_service
from ..children.dependencies import get_child_profile_service
from ..children.service import ChildProfileService
from ..credentials.dependencies import get_credential_service
from ..credentials.service import CredentialService
from ..voice_presets.dependencies import get_voice_preset_service
from ..voice_presets.service import VoicePresetService
from .generation import StoryGenerationService, StoryIdeaService
from .repository import StoryRepository
from .service import StoryService
from .synthesis import VoiceSynthesisService


def get_story_service(
    db: AsyncSession = Depends(get_db),
    storage_service: AbstractStorageService = Depends(get_storage_service),
) -> StoryService:
    return StoryService(
        story_repo=StoryRepository(db),
        storage_service=storage_service,
        db_session=db,
    )


def get_story_idea_service(
    db: AsyncSession = Depends(get_db),
    child_service: ChildProfileService = Depends(get_child_profile_service),
    credential_service: CredentialService = Depends(get_credential_service),
    ai_factory: AIProviderFactory = Depends(get_ai_factory),
) -> StoryIdeaService:
    return StoryIdeaService(
        story_repo=StoryRepository(db),
        child_service=child_service,
        credential_service=credential_service,
        ai_factory=ai_factory,
    )


def get_story_generation_service(
    db: AsyncSession = Depends(get_db),
    child_service: ChildProfileService = Depends(get_child_profile_service),
    preset_service: VoicePresetService = Depends(get_voice_preset_service),
    credential_service: CredentialService = Depends(get_credential_service),
    ai_factory: AIProviderFactory = Depends(get_ai_factory),
) -> StoryGenerationService:
    return StoryGenerationService(
        story_repo=StoryRepository(db),
        child_service=child_service,
        preset_service=preset_service,
        credential_service=credential_service,
        ai_factory=ai_factory,
        db_session=db,
    )


def get_voice_synthesis_service(
    db: AsyncSession = Depends(get_db),
    preset_service: VoicePresetService = Depends(get_voice_preset_service),
    credential_service: CredentialService = Depends(get_credential_service),
    storage_service: AbstractStorageService = Depends(get_storage_service),
    ai_factory: AIProviderFactory = Depends(get_ai_factory),
) -> VoiceSynthesisService:
    """VoiceSynthesisService 의존성 주입"""
    return VoiceSynthesisService(
        story_repo=StoryRepository(db),
        preset_service=preset_service,
        credential_service=credential_service,
        storage_service=storage_service,
        ai_factory=ai_factory,
        db_session=db,
    )
