"""
Core Configuration Module
환경변수 및 애플리케이션 설정 중앙 관리
"""

from typing import List, Optional
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """애플리케이션 설정 (Pydantic Settings v2)"""

    # ==================== Application ====================
    app_title: str = "Bedtime Story Service"
    app_description: str = "아이 맞춤 동화 아이디어/본문 생성 및 음성 낭독 API"
    app_version: str = "1.0.0"
    app_env: str = Field(default="dev", env="APP_ENV")
    debug: bool = Field(default=False, env="DEBUG")
    log_level: str = Field(default="INFO", env="LOG_LEVEL")
    log_json_format: bool = Field(default=False, env="LOG_JSON_FORMAT")

    # ==================== Database (PostgreSQL) ====================
    postgres_user: str = Field(default="bedtime_user", env="POSTGRES_USER")
    postgres_password: str = Field(default="bedtime_password", env="POSTGRES_PASSWORD")
    postgres_db: str = Field(default="bedtime_db", env="POSTGRES_DB")
    postgres_host: str = Field(default="postgres", env="POSTGRES_HOST")
    postgres_port: int = Field(default=5432, env="POSTGRES_PORT")

    # 테스트/로컬 실행용 전체 URL 지정 (예: sqlite+aiosqlite:///:memory:)
    database_url_override: Optional[str] = Field(
        default=None, validation_alias="DATABASE_URL"
    )

    @property
    def database_url(self) -> str:
        """SQLAlchemy Database URL (Async)"""
        if self.database_url_override:
            return self.database_url_override
        return (
            f"postgresql+asyncpg://{self.postgres_user}:{self.postgres_password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )

    # ==================== JWT Authentication ====================
    jwt_secret_key: str = Field(
        default="default-secret-key-change-in-production-min-32-characters",
        env="JWT_SECRET_KEY",
    )
    jwt_algorithm: str = Field(default="HS256", env="JWT_ALGORITHM")
    jwt_access_token_expire_minutes: int = Field(
        default=60, env="JWT_ACCESS_TOKEN_EXPIRE_MINUTES"
    )

    # ==================== Credential Encryption ====================
    # 사용자 Provider API 키 암호화용 (AES-GCM 키 = SHA-256(secret))
    credential_encryption_secret: str = Field(
        default="default-credential-secret-change-in-production",
        env="CREDENTIAL_ENCRYPTION_SECRET",
    )

    # ==================== AI Providers ====================
    # Text Generation (아이디어/본문)
    ai_text_provider: str = Field(default="google", env="AI_TEXT_PROVIDER")
    text_model: str = Field(default="gemini-2.5-flash", env="TEXT_MODEL")

    # Speech Synthesis (낭독)
    ai_speech_provider: str = Field(default="hume", env="AI_SPEECH_PROVIDER")
    hume_api_url: str = Field(default="https://api.hume.ai/v0", env="HUME_API_URL")
    speech_synthesis_timeout: float = Field(
        default=300.0,
        env="SPEECH_SYNTHESIS_TIMEOUT",
        description="TTS 응답 대기 시간 (초). 긴 동화는 수 분이 걸림",
    )
    fallback_voice_description: str = Field(
        default="A gentle, engaging storyteller perfect for children's bedtime stories",
        env="FALLBACK_VOICE_DESCRIPTION",
    )
    voice_sample_text: str = Field(
        default=(
            "Once upon a time, in a magical forest, there lived a group of "
            "friendly animals. They all worked together to protect their home "
            "and had wonderful adventures every day."
        ),
        env="VOICE_SAMPLE_TEXT",
    )

    # ==================== Storage ====================
    storage_provider: str = Field(default="local", env="STORAGE_PROVIDER")
    storage_base_path: str = Field(default="/app/data", env="STORAGE_BASE_PATH")
    storage_base_url: str = Field(default="/api/v1/files", env="STORAGE_BASE_URL")

    # AWS S3 (if STORAGE_PROVIDER=s3)
    aws_access_key_id: Optional[str] = Field(default=None, env="AWS_ACCESS_KEY_ID")
    aws_secret_access_key: Optional[str] = Field(
        default=None, env="AWS_SECRET_ACCESS_KEY"
    )
    aws_s3_bucket_name: Optional[str] = Field(default=None, env="AWS_S3_BUCKET_NAME")
    aws_s3_region: str = Field(default="ap-northeast-2", env="AWS_S3_REGION")
    aws_s3_presigned_url_expiration: int = Field(
        default=3600, env="AWS_S3_PRESIGNED_URL_EXPIRATION"
    )  # Pre-signed URL 만료 시간 (초, 기본 1시간)

    # ==================== CORS ====================
    cors_origins_str: str = Field(
        default="http://localhost:5173", validation_alias="CORS_ORIGINS"
    )

    @property
    def cors_origins(self) -> List[str]:
        """CORS origins를 쉼표로 분리하여 리스트로 반환"""
        return [origin.strip() for origin in self.cors_origins_str.split(",")]

    cors_allow_credentials: bool = Field(default=True, env="CORS_ALLOW_CREDENTIALS")
    cors_allow_methods: str = Field(
        default="GET,POST,PUT,PATCH,DELETE,OPTIONS", env="CORS_ALLOW_METHODS"
    )
    cors_allow_headers: str = Field(default="*", env="CORS_ALLOW_HEADERS")

    # ==================== HTTP Client ====================
    http_timeout: float = Field(default=60.0, env="HTTP_TIMEOUT")

    # ==================== Audio Reaper ====================
    # generating 상태로 멈춘 스토리를 error로 정리하는 주기 작업
    audio_reaper_enabled: bool = Field(default=True, env="AUDIO_REAPER_ENABLED")
    audio_reaper_interval_seconds: int = Field(
        default=60, env="AUDIO_REAPER_INTERVAL_SECONDS"
    )
    audio_generating_max_age_minutes: int = Field(
        default=30,
        env="AUDIO_GENERATING_MAX_AGE_MINUTES",
        description="generating 상태 최대 유지 시간 (분). synthesis timeout보다 길어야 함",
    )

    # ==================== Pydantic Config ====================
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ==================== Validators ====================
    @field_validator("jwt_secret_key", "credential_encryption_secret")
    @classmethod
    def validate_secret_length(cls, v: str, info) -> str:
        """서명/암호화 secret은 최소 32자"""
        if len(v) < 32:
            raise ValueError(f"{info.field_name.upper()} must be at least 32 characters long")
        return v

    @field_validator("app_env")
    @classmethod
    def validate_app_env(cls, v: str) -> str:
        """APP_ENV 값 검증"""
        allowed_envs = ["dev", "prod", "testing"]
        if v not in allowed_envs:
            raise ValueError(f"APP_ENV must be one of {allowed_envs}")
        return v

    @model_validator(mode="after")
    def validate_reaper_window(self) -> "Settings":
        """합성 중인 동화를 reaper가 error로 바꾸지 않도록 max age는 합성 타임아웃보다 길어야 함"""
        if self.audio_generating_max_age_minutes * 60 <= self.speech_synthesis_timeout:
            raise ValueError(
                "AUDIO_GENERATING_MAX_AGE_MINUTES must exceed SPEECH_SYNTHESIS_TIMEOUT"
            )
        return self


# 싱글톤 인스턴스
settings = Settings()
