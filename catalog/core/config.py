from dataclasses import dataclass

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator


@dataclass(frozen=True)
class RemoteConfig:
    base_url: str
    auth_token: str
    timeout_seconds: float = 10.0


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    env: str = Field(default="local", alias="ENV")
    database_url: str = Field(default="sqlite+aiosqlite:///./catalog.db", alias="DATABASE_URL")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # ─────────────────────────────────────────────
    # TMDB
    # ─────────────────────────────────────────────
    tmdb_token: str = Field(alias="TMDB_TOKEN")
    tmdb_base_url: str = Field(default="https://api.themoviedb.org/3", alias="TMDB_BASE_URL")
    tmdb_image_base_url: str = Field(default="https://image.tmdb.org/t/p", alias="TMDB_IMAGE_BASE_URL")
    tmdb_timeout_seconds: float = Field(default=10.0, alias="TMDB_TIMEOUT_SECONDS")

    catalog_list_page: int = Field(default=1, ge=1, alias="CATALOG_LIST_PAGE")

    @field_validator("database_url", mode="before")
    @classmethod
    def normalize_database_url(cls, value: object) -> object:
        if not isinstance(value, str):
            return value
        cleaned = value.strip()
        if cleaned.startswith("postgres://"):
            cleaned = f"postgresql://{cleaned[len('postgres://'):]}"
        if cleaned.startswith("postgresql://") and not cleaned.startswith("postgresql+"):
            cleaned = cleaned.replace("postgresql://", "postgresql+asyncpg://", 1)
        if cleaned.startswith("sqlite://") and not cleaned.startswith("sqlite+"):
            cleaned = cleaned.replace("sqlite://", "sqlite+aiosqlite://", 1)
        return cleaned

    @field_validator("tmdb_base_url", "tmdb_image_base_url", mode="before")
    @classmethod
    def strip_trailing_slash(cls, value: object) -> object:
        if not isinstance(value, str):
            return value
        return value.strip().rstrip("/")

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: object) -> object:
        if not isinstance(value, str):
            return value
        return value.strip().upper()

    def remote_config(self) -> RemoteConfig:
        return RemoteConfig(
            base_url=self.tmdb_base_url,
            auth_token=self.tmdb_token,
            timeout_seconds=self.tmdb_timeout_seconds,
        )

settings = Settings()
