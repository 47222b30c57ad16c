from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .locale import to_directory_name

ENV_FILE_NAME = ".env"


class Settings(BaseSettings):
    LINGON_ROOT: Path = Path("./data")
    LINGON_DEFAULT_LOCALE: str = "en_US"
    LINGON_OWNER: str = ""  # Package whose bundled languages/ is imported
    LOG_LEVEL: str = "INFO"
    LOG_FILE: bool = False

    @field_validator("LINGON_DEFAULT_LOCALE", mode="before")
    @classmethod
    def canonical_locale(cls, v):  # type: ignore
        name = to_directory_name(str(v)) if v is not None else None
        if not name:
            raise ValueError(f"Invalid locale: {v!r}")
        return name

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def upper_level(cls, v):  # type: ignore
        return str(v).strip().upper() or "INFO"

    model_config = SettingsConfigDict(
        env_file=ENV_FILE_NAME,
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Load .env file explicitly
    load_dotenv(ENV_FILE_NAME, override=False)
    return Settings()
