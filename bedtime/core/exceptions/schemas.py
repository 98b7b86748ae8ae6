"""
Error Response Schemas
에러 응답 스키마
"""

from datetime import datetime
from typing import Optional, Dict, Any, List

from pydantic import BaseModel, ConfigDict, Field


class ErrorDetail(BaseModel):
    """개별 에러 상세 정보"""

    field: Optional[str] = Field(None, description="에러 발생 필드명")
    message: str = Field(..., description="에러 메시지")
    code: Optional[str] = Field(None, description="세부 에러 코드")


class ErrorResponse(BaseModel):
    """
    표준 에러 응답

    모든 API 에러는 이 형식으로 반환됩니다.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "error_code": "BIZ_101",
                "message": "음성 합성 API 키가 등록되지 않았습니다. 설정에서 API 키를 추가해주세요",
                "status_code": 400,
                "timestamp": "2025-12-02T07:00:00.000Z",
                "request_id": "5f0c6b0e9d8a4c1f",
                "path": "/api/v1/stories/3fa85f64-5717-4562-b3fc-2c963f66afa6/audio",
                "details": {"kind": "speech"},
            }
        }
    )

    error_code: str = Field(..., description="에러 코드 (예: AUTH_001)")
    message: str = Field(..., description="사용자 친화적 에러 메시지")
    status_code: int = Field(..., description="HTTP 상태 코드")
    timestamp: datetime = Field(
        default_factory=datetime.utcnow, description="에러 발생 시각"
    )
    request_id: Optional[str] = Field(None, description="요청 추적 ID (X-Request-ID)")
    path: Optional[str] = Field(None, description="요청 경로")
    details: Optional[Dict[str, Any]] = Field(
        None, description="추가 에러 정보 (선택사항)"
    )


class ValidationErrorResponse(BaseModel):
    """검증 에러 응답 (422)"""

    error_code: str = Field(default="VAL_001", description="에러 코드")
    message: str = Field(default="입력 데이터 검증 실패", description="에러 메시지")
    status_code: int = Field(default=422, description="HTTP 상태 코드")
    timestamp: datetime = Field(default_factory=datetime.utcnow)
    request_id: Optional[str] = Field(None, description="요청 추적 ID")
    path: Optional[str] = Field(None, description="요청 경로")
    errors: List[ErrorDetail] = Field(..., description="검증 에러 목록")
