# filehub/core/config.py
import secrets
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Every user gets <storage_root>/<username>
    storage_root: Path = Path("UserFiles")
    database_url: str = "sqlite:///./filehub.db"
    anonymous_user: str = "anonymous"

    # Signs the session cookie; set it in .env or sessions end on restart
    secret_key: str = Field(default_factory=lambda: secrets.token_urlsafe(32))

    preview_text_encoding: str = "utf-8-sig"
    # None means no limit: previews load the whole file into memory
    preview_max_bytes: int | None = None

    log_level: str = "INFO"

    # Load from .env at project root, FILEHUB_ prefixed
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="FILEHUB_",
        extra="ignore",  # ignore any extra stuff in .env
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
