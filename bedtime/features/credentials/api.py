"""
Credential API Endpoints
Provider API 키 등록 및 상태 조회
"""

from fastapi import APIRouter, Depends, status

from ...core.auth import UserContext, get_user_context
from .dependencies import get_credential_service
from .models import CredentialKind
from .schemas import CredentialStatusResponse, StoreCredentialRequest
from .service import CredentialService

router = APIRouter(prefix="/credentials", tags=["Credentials"])


@router.get("/status", response_model=CredentialStatusResponse)
async def get_credential_status(
    ctx: UserContext = Depends(get_user_context),
    service: CredentialService = Depends(get_credential_service),
):
    """API 키 등록 여부 조회 (text / speech)"""
    return await service.get_status(ctx)


@router.put("/{kind}", status_code=status.HTTP_204_NO_CONTENT)
async def store_credential(
    kind: CredentialKind,
    request: StoreCredentialRequest,
    ctx: UserContext = Depends(get_user_context),
    service: CredentialService = Depends(get_credential_service),
):
    """API 키 등록/교체 (암호화 저장)"""
    await service.store_credential(ctx, kind, request.api_key)
