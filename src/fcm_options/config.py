from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConfigError(RuntimeError):
    pass


class Settings(BaseSettings):
    """
    Single source of truth for config.

    - Loads from env (and `.env` if present).
    - Option defaults are not validated here; `OptionsBuilder.from_settings()`
      routes them through the regular setters.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # default delivery options
    default_priority: str | None = Field(default=None, alias="FCM_DEFAULT_PRIORITY")
    default_time_to_live: int | None = Field(default=None, alias="FCM_DEFAULT_TIME_TO_LIVE")
    default_dry_run: bool = Field(default=False, alias="FCM_DRY_RUN")
    default_restricted_package_name: str | None = Field(
        default=None, alias="FCM_RESTRICTED_PACKAGE_NAME"
    )

    # logging
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_dir: Path | None = Field(default=None, alias="FCM_LOG_DIR")  # unset: stdout only
    log_max_bytes: int = Field(default=5 * 1024 * 1024, alias="LOG_MAX_BYTES")
    log_backup_count: int = Field(default=3, alias="LOG_BACKUP_COUNT")


def _validate_settings(s: Settings) -> None:
    level = str(s.log_level or "").strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigError(f"Unknown LOG_LEVEL: {s.log_level!r}")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    s = Settings()
    _validate_settings(s)
    return s
