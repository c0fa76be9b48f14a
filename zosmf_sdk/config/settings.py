"""
Centralized settings

Single source of environment variables and their defaults.
"""

from __future__ import annotations

import os
from functools import lru_cache

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field

# .env is looked up from the working directory upwards; real env vars win
_dotenv_path = find_dotenv(usecwd=True)
load_dotenv(_dotenv_path, override=False)


class Settings(BaseModel):
    """SDK settings"""

    # z/OSMF connection
    zosmf_host: str = Field(default="", alias="ZOSMF_HOST")
    zosmf_port: int = Field(default=443, alias="ZOSMF_PORT")
    zosmf_user: str = Field(default="", alias="ZOSMF_USER")
    zosmf_password: str = Field(default="", alias="ZOSMF_PASSWORD")
    zosmf_verify_ssl: bool = Field(default=True, alias="ZOSMF_VERIFY_SSL")
    zosmf_timeout: float = Field(default=30.0, alias="ZOSMF_TIMEOUT")

    # Job monitor polling defaults
    job_monitor_attempts: int = Field(default=1000, alias="JOB_MONITOR_ATTEMPTS")
    job_monitor_watch_delay_ms: int = Field(
        default=3000, alias="JOB_MONITOR_WATCH_DELAY_MS"
    )
    job_monitor_line_limit: int = Field(default=1000, alias="JOB_MONITOR_LINE_LIMIT")

    log_level: str = Field(default="WARNING", alias="LOG_LEVEL")

    model_config = {"populate_by_name": True}


@lru_cache
def get_settings() -> Settings:
    """Return the cached settings."""
    return Settings.model_validate(dict(os.environ))


def reload_settings() -> Settings:
    """Re-read the environment."""
    get_settings.cache_clear()
    return get_settings()
