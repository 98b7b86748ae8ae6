"""
Hume Error Decoder
Hume API 에러 응답 본문을 애플리케이션 예외로 변환

Hume 에러 포맷이 바뀌면 이 모듈만 수정한다.
"""

from typing import Any, Optional

from pydantic import BaseModel, ValidationError

from ....core.exceptions import AppException
from ..exceptions import (
    DuplicateVoiceNameException,
    ProviderAuthenticationException,
    ProviderRequestException,
)

PROVIDER_NAME = "Hume"

HUME_CLIENT_ERROR_SLUG = "client_error"
HUME_UNIQUE_NAME_ERROR_CODE = "E0603"


class HumeErrorDetails(BaseModel):
    type: str
    message: str
    code: str
    slug: str


class HumeErrorBody(BaseModel):
    """{"details": {"type", "message", "code", "slug"}}"""

    details: HumeErrorDetails


def parse_error_body(body: Any) -> Optional[HumeErrorBody]:
    """알려진 에러 포맷이면 파싱, 아니면 None"""
    if not isinstance(body, dict):
        return None
    try:
        return HumeErrorBody.model_validate(body)
    except ValidationError:
        return None


def is_duplicate_voice_name(body: Any) -> bool:
    """음성 이름 중복 에러 여부 (code=E0603, slug=client_error)"""
    parsed = parse_error_body(body)
    if parsed is None:
        return False
    return (
        parsed.details.code == HUME_UNIQUE_NAME_ERROR_CODE
        and parsed.details.slug == HUME_CLIENT_ERROR_SLUG
    )


def decode_error(
    status_code: int,
    body: Any,
    voice_name: Optional[str] = None,
) -> AppException:
    """
    Hume 에러 응답을 예외로 변환

    Args:
        status_code: HTTP 상태 코드
        body: JSON 디코딩된 응답 본문 (JSON이 아니면 None 또는 문자열)
        voice_name: 음성 등록 요청이었다면 요청한 이름

    Returns:
        AppException: 호출 측에서 raise
    """
    if status_code in (401, 403):
        return ProviderAuthenticationException(PROVIDER_NAME, reason=f"HTTP {status_code}")

    if is_duplicate_voice_name(body):
        return DuplicateVoiceNameException(voice_name)

    parsed = parse_error_body(body)
    if parsed is not None:
        reason = f"{parsed.details.code}: {parsed.details.message}"
    elif isinstance(body, dict) and isinstance(body.get("message"), str):
        reason = body["message"]
    else:
        reason = f"HTTP {status_code}"

    return ProviderRequestException(PROVIDER_NAME, reason=reason, status_code=status_code)
