"""
Voice Preset Dependencies
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ...core.database.session import get_db
from ...infrastructure.ai.factory import AIProviderFactory, get_ai_factory
from ...infrastructure.storage.base import AbstractStorageService
from ...infrastructure.storage.dependencies import get_storage_service
from ..credentials.dependencies import get_credential_service
from ..credentials.service import CredentialService
from .provisioning import VoicePresetProvisioningService
from .repository import VoicePresetRepository
from .service import VoicePresetService


def get_voice_preset_service(
    db: AsyncSession = Depends(get_db),
    storage_service: AbstractStorageService = Depends(get_storage_service),
) -> VoicePresetService:
    return VoicePresetService(
        preset_repo=VoicePresetRepository(db),
        storage_service=storage_service,
        db_session=db,
    )


def get_provisioning_service(
    db: AsyncSession = Depends(get_db),
    storage_service: AbstractStorageService = Depends(get_storage_service),
    ai_factory: AIProviderFactory = Depends(get_ai_factory),
    credential_service: CredentialService = Depends(get_credential_service),
    preset_service: VoicePresetService = Depends(get_voice_preset_service),
) -> VoicePresetProvisioningService:
    """VoicePresetProvisioningService 의존성 주입"""
    return VoicePresetProvisioningService(
        preset_repo=VoicePresetRepository(db),
        preset_service=preset_service,
        credential_service=credential_service,
        storage_service=storage_service,
        ai_factory=ai_factory,
        db_session=db,
    )
