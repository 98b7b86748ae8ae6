"""
Error Code Definitions
에러 코드 정의
"""

from enum import Enum


class ErrorCode(str, Enum):
    """
    애플리케이션 에러 코드

    규칙:
    - AUTH_xxx: 인증 관련 에러 (401)
    - AUTHZ_xxx: 권한 관련 에러 (403)
    - VAL_xxx: 검증 관련 에러 (400, 422)
    - BIZ_xxx: 비즈니스 로직 에러 (400, 404, 409)
    - EXT_xxx: 외부 Provider 에러 (502)
    - SYS_xxx: 시스템 에러 (500)
    """

    # ==================== Authentication (AUTH_xxx) ====================
    AUTH_INVALID_CREDENTIALS = "AUTH_001"
    """이메일 또는 비밀번호가 일치하지 않습니다"""

    AUTH_TOKEN_EXPIRED = "AUTH_003"
    """토큰이 만료되었습니다"""

    AUTH_TOKEN_INVALID = "AUTH_004"
    """유효하지 않은 토큰입니다"""

    AUTH_EMAIL_ALREADY_EXISTS = "AUTH_005"
    """이미 등록된 이메일입니다"""

    AUTH_USER_NOT_FOUND = "AUTH_007"
    """토큰의 사용자가 존재하지 않습니다"""

    # ==================== Authorization (AUTHZ_xxx) ====================
    AUTHZ_FORBIDDEN = "AUTHZ_001"
    """접근 권한이 없습니다"""

    # ==================== Validation (VAL_xxx) ====================
    VAL_INVALID_INPUT = "VAL_001"
    """입력 데이터가 유효하지 않습니다"""

    VAL_MISSING_FIELD = "VAL_002"
    """필수 필드가 누락되었습니다"""

    VAL_INVALID_FORMAT = "VAL_003"
    """잘못된 형식입니다"""

    # ==================== Business Logic (BIZ_xxx) ====================
    BIZ_RESOURCE_NOT_FOUND = "BIZ_001"
    """리소스를 찾을 수 없습니다"""

    BIZ_OPERATION_FAILED = "BIZ_002"
    """작업 수행에 실패했습니다"""

    BIZ_DUPLICATE_RESOURCE = "BIZ_003"
    """중복된 리소스입니다"""

    # Credential (BIZ_1xx)
    BIZ_CREDENTIAL_MISSING = "BIZ_101"
    """Provider API 키가 등록되지 않았습니다"""

    BIZ_CREDENTIAL_INVALID = "BIZ_102"
    """Provider API 키를 복호화할 수 없거나 Provider가 거부했습니다"""

    # Child Profile (BIZ_2xx)
    BIZ_CHILD_NOT_FOUND = "BIZ_201"
    """아이 프로필을 찾을 수 없습니다"""

    BIZ_CHILD_UNAUTHORIZED = "BIZ_202"
    """아이 프로필 접근 권한이 없습니다"""

    # Voice Preset (BIZ_3xx)
    BIZ_VOICE_PRESET_NOT_FOUND = "BIZ_301"
    """보이스 프리셋을 찾을 수 없습니다"""

    BIZ_VOICE_PRESET_UNAUTHORIZED = "BIZ_302"
    """보이스 프리셋 접근 권한이 없습니다"""

    BIZ_VOICE_NAME_DUPLICATE = "BIZ_303"
    """이미 사용 중인 보이스 이름입니다"""

    BIZ_VOICE_PRESET_CREATION_FAILED = "BIZ_304"
    """보이스 프리셋 생성에 실패했습니다"""

    # Story (BIZ_4xx)
    BIZ_STORY_NOT_FOUND = "BIZ_401"
    """동화를 찾을 수 없습니다"""

    BIZ_STORY_UNAUTHORIZED = "BIZ_402"
    """동화 접근 권한이 없습니다"""

    BIZ_IDEA_GENERATION_FAILED = "BIZ_403"
    """동화 아이디어 생성에 실패했습니다"""

    BIZ_STORY_GENERATION_FAILED = "BIZ_404"
    """동화 본문 생성에 실패했습니다"""

    BIZ_STORY_SAVE_FAILED = "BIZ_405"
    """생성된 동화 저장에 실패했습니다"""

    BIZ_SYNTHESIS_FAILED = "BIZ_406"
    """동화 낭독 음성 생성에 실패했습니다"""

    BIZ_SYNTHESIS_IN_PROGRESS = "BIZ_407"
    """이미 낭독 음성을 생성 중입니다"""

    # ==================== External Provider (EXT_xxx) ====================
    EXT_PROVIDER_ERROR = "EXT_001"
    """외부 Provider 호출에 실패했습니다"""

    EXT_PROVIDER_AUTH_FAILED = "EXT_002"
    """외부 Provider가 API 키를 거부했습니다"""

    # ==================== System (SYS_xxx) ====================
    SYS_INTERNAL_ERROR = "SYS_001"
    """서버 내부 오류가 발생했습니다"""

    SYS_DATABASE_ERROR = "SYS_002"
    """데이터베이스 오류가 발생했습니다"""

    SYS_STORAGE_ERROR = "SYS_003"
    """파일 저장소 오류가 발생했습니다"""
