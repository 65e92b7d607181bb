from functools import lru_cache
from typing import Optional
from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Thumbor connection and image size configuration.

    Values come from ``THUMBOR_*`` environment variables or a ``.env`` file.
    An empty ``secret`` means URLs are issued unsigned, which the server
    must allow.
    """

    model_config = SettingsConfigDict(
        env_prefix="THUMBOR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    server: str = "http://localhost:8888"
    secret: SecretStr = SecretStr("")
    smart_crop: bool = True

    # Built-in sizes, same defaults as a fresh WordPress install
    thumbnail_width: int = Field(150, ge=0)
    thumbnail_height: int = Field(150, ge=0)
    thumbnail_crop: bool = True
    medium_width: int = Field(300, ge=0)
    medium_height: int = Field(300, ge=0)
    large_width: int = Field(1024, ge=0)
    large_height: int = Field(1024, ge=0)

    presets_dir: Optional[str] = None
    log_level: str = "INFO"

    @field_validator("server")
    @classmethod
    def _untrailingslash(cls, v: str) -> str:
        v = (v or "").strip().rstrip("/")
        if not v:
            raise ValueError("server is required (set THUMBOR_SERVER)")
        return v

    @property
    def secret_key(self) -> str:
        return self.secret.get_secret_value()


@lru_cache()
def get_settings() -> Settings:
    return Settings()
