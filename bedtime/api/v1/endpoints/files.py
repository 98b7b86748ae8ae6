"""
File Access API
로컬 스토리지에 저장된 낭독 음성과 보이스 샘플 제공
"""

import logging
import mimetypes

from fastapi import APIRouter, Depends, Response

from bedtime.core.config import settings
from bedtime.core.exceptions import ErrorCode, NotFoundException
from bedtime.infrastructure.storage.base import AbstractStorageService
from bedtime.infrastructure.storage.dependencies import get_storage_service

logger = logging.getLogger(__name__)

router = APIRouter()

# 플랫폼 기본값(audio/x-wav 등) 대신 합성 결과와 같은 타입으로 응답
mimetypes.add_type("audio/wav", ".wav")


@router.get(
    "/files/{file_path:path}",
    summary="로컬 저장 파일 접근",
    responses={404: {"description": "파일 없음 또는 S3 모드"}},
)
async def get_file(
    file_path: str,
    storage_service: AbstractStorageService = Depends(get_storage_service),
):
    """
    <audio> 태그가 직접 재생하므로 Bearer 인증 없음. 경로에 UUID가 들어가 추측하기 어렵다.
    S3 모드에서는 presigned URL을 쓰므로 항상 404.
    """
    if settings.storage_provider != "local":
        raise NotFoundException(
            error_code=ErrorCode.BIZ_RESOURCE_NOT_FOUND,
            message="파일을 찾을 수 없습니다",
            details={"path": file_path},
        )

    try:
        content = await storage_service.get(file_path)
    except (FileNotFoundError, ValueError) as e:
        logger.warning("File lookup failed", extra={"path": file_path, "reason": str(e)})
        raise NotFoundException(
            error_code=ErrorCode.BIZ_RESOURCE_NOT_FOUND,
            message="파일을 찾을 수 없습니다",
            details={"path": file_path},
        )

    media_type = mimetypes.guess_type(file_path)[0] or "application/octet-stream"
    filename = file_path.rsplit("/", 1)[-1]
    return Response(
        content=content,
        media_type=media_type,
        headers={
            "Cache-Control": "private, max-age=3600",
            "Content-Disposition": f'inline; filename="{filename}"',
        },
    )
