"""
Voice Preset API Endpoints
"""

import uuid
from typing import List

from fastapi import APIRouter, Depends, status

from ...core.auth import UserContext, get_user_context
from ...core.exceptions import ErrorResponse
from .dependencies import get_provisioning_service, get_voice_preset_service
from .exceptions import VoicePresetNotFoundException
from .models import VoicePreset
from .provisioning import VoicePresetProvisioningService
from .schemas import VoicePresetCreate, VoicePresetResponse, VoicePresetUpdate
from .service import VoicePresetService

router = APIRouter(prefix="/voice-presets", tags=["Voice Presets"])


def _to_response(preset: VoicePreset, service: VoicePresetService) -> VoicePresetResponse:
    return VoicePresetResponse(
        id=preset.id,
        name=preset.name,
        description=preset.description,
        sample_audio_url=service.get_sample_url(preset),
        created_at=preset.created_at,
    )


@router.get("", response_model=List[VoicePresetResponse])
async def list_voice_presets(
    ctx: UserContext = Depends(get_user_context),
    service: VoicePresetService = Depends(get_voice_preset_service),
):
    """내 보이스 프리셋 목록"""
    presets = await service.list(ctx)
    return [_to_response(p, service) for p in presets]


@router.post(
    "",
    response_model=VoicePresetResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse, "description": "음성 API 키 없음/거부"},
        409: {"model": ErrorResponse, "description": "Provider에 같은 이름 존재"},
        502: {"model": ErrorResponse, "description": "샘플 합성/등록 실패"},
    },
)
async def create_voice_preset(
    request: VoicePresetCreate,
    ctx: UserContext = Depends(get_user_context),
    provisioning: VoicePresetProvisioningService = Depends(get_provisioning_service),
    service: VoicePresetService = Depends(get_voice_preset_service),
):
    """
    보이스 프리셋 생성

    음성 설명으로 샘플을 합성하고 Provider에 음성을 등록한다.
    """
    preset = await provisioning.create_preset(ctx, request.name, request.description)
    return _to_response(preset, service)


@router.get("/{preset_id}", response_model=VoicePresetResponse)
async def get_voice_preset(
    preset_id: uuid.UUID,
    ctx: UserContext = Depends(get_user_context),
    service: VoicePresetService = Depends(get_voice_preset_service),
):
    preset = await service.get(ctx, preset_id)
    if preset is None:
        raise VoicePresetNotFoundException(str(preset_id))
    return _to_response(preset, service)


@router.patch("/{preset_id}", response_model=VoicePresetResponse)
async def update_voice_preset(
    preset_id: uuid.UUID,
    request: VoicePresetUpdate,
    ctx: UserContext = Depends(get_user_context),
    service: VoicePresetService = Depends(get_voice_preset_service),
):
    """로컬 이름/설명 수정"""
    preset = await service.update(
        ctx, preset_id, name=request.name, description=request.description
    )
    return _to_response(preset, service)


@router.delete("/{preset_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_voice_preset(
    preset_id: uuid.UUID,
    ctx: UserContext = Depends(get_user_context),
    provisioning: VoicePresetProvisioningService = Depends(get_provisioning_service),
):
    """보이스 프리셋 삭제 (Provider 음성 + 샘플 파일 + DB 행)"""
    await provisioning.delete_preset(ctx, preset_id)
