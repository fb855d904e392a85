from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    database_url: str = "sqlite:///./skill_bridge.db"
    cors_origins: str = "http://localhost:3000,http://127.0.0.1:3000"
    log_level: str = "INFO"
    gemini_api_key: str | None = None
    gemini_model: str = "gemini-1.5-flash-latest"
    gemini_api_base: str = "https://generativelanguage.googleapis.com/v1beta"
    generation_temperature: float = 0.7
    generation_top_k: int = 40
    generation_top_p: float = 0.95
    generation_max_output_tokens: int = 8192
    generation_timeout_seconds: float = 60.0
    generation_json_mode: bool = False
    internal_api_base: str = "http://127.0.0.1:8000/api"
    internal_api_timeout_seconds: float = 90.0
    auth_secret: str = "change-me-auth-secret"
    auth_token_ttl_seconds: int = 43200
    auth_refresh_token_ttl_seconds: int = 60 * 60 * 24 * 30
    auth_login_max_attempts: int = 8
    auth_login_window_seconds: int = 60 * 10
    ai_rate_limit_per_minute: int = 20
    assessment_retake_months: int = 6

    @field_validator("database_url", mode="before")
    @classmethod
    def normalize_database_url(cls, value: str) -> str:
        # Render/Postgres providers often expose postgres:// URLs.
        if isinstance(value, str) and value.startswith("postgres://"):
            return "postgresql://" + value[len("postgres://"):]
        return value

    @field_validator("gemini_api_base", "internal_api_base", mode="after")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

settings = Settings()
