# Settings for the MeigetsuID client, loaded from MEIGETSUID_* env vars.
# Created: 2026-10-19

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

DEFAULT_SERVER = "https://idportal.meigetsu.jp/api/v2"


class Settings(BaseSettings):
    """Client configuration.

    ``application_update_method`` and ``check_envelope`` select between the
    two published API revisions: older servers take ``PUT /application`` and
    answer status/age checks with a bare result, newer ones take ``PATCH``
    and wrap the result with an execution id and status code.
    """

    model_config = SettingsConfigDict(env_prefix="MEIGETSUID_", extra="ignore")

    server: str = DEFAULT_SERVER
    application_update_method: Literal["PUT", "PATCH"] = "PUT"
    check_envelope: Literal["bare", "wrapped"] = "bare"
    timeout: float = 15.0

    @field_validator("server")
    @classmethod
    def _strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    settings = Settings()
    logger.debug("MeigetsuID API root: %s", settings.server)
    return settings


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    get_settings.cache_clear()
