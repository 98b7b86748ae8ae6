from pydantic import BaseModel, Field


class StoreCredentialRequest(BaseModel):
    """API 키 등록 요청"""

    api_key: str = Field(..., min_length=1, max_length=512, description="Provider API 키")


class CredentialStatusResponse(BaseModel):
    """API 키 등록 여부 (키 값은 반환하지 않음)"""

    text: bool = Field(..., description="텍스트 생성 API 키 등록 여부")
    speech: bool = Field(..., description="음성 합성 API 키 등록 여부")
