"""
Zowe team configuration

Reads ``zowe.config.json`` files and turns their zosmf/base profiles into a
ZOSConnection. Secure properties kept in the OS credential vault are not
read; pass user and password explicitly or through ZOSMF_USER /
ZOSMF_PASSWORD instead.
"""

from __future__ import annotations

import json
from enum import Enum
from pathlib import Path
from typing import Any, Optional

from loguru import logger
from pydantic import BaseModel, Field, ValidationError

from zosmf_sdk.api.connection import ZOSConnection
from zosmf_sdk.config.settings import get_settings
from zosmf_sdk.shared.exceptions import TeamConfigError

DEFAULT_CONFIG_FILE = "zowe.config.json"


class SectionType(str, Enum):
    SCHEMA = "$schema"
    PROFILES = "profiles"
    DEFAULTS = "defaults"
    AUTOSTORE = "autoStore"


class Profile(BaseModel):
    """One named profile of the team config."""

    name: str
    type: Optional[str] = None
    properties: dict[str, Any] = Field(default_factory=dict)
    secure: list[str] = Field(default_factory=list)


class TeamConfig(BaseModel):
    """Parsed team config document."""

    schema_ref: Optional[str] = Field(default=None, alias=SectionType.SCHEMA.value)
    profiles: dict[str, Profile] = Field(default_factory=dict)
    defaults: dict[str, str] = Field(default_factory=dict)
    auto_store: bool = Field(default=True, alias=SectionType.AUTOSTORE.value)

    model_config = {"populate_by_name": True}

    def get_profile(self, name: str) -> Profile:
        try:
            return self.profiles[name]
        except KeyError:
            raise TeamConfigError(f"profile {name!r} not found") from None

    def default_profile(self, profile_type: str) -> Profile | None:
        """Profile named in ``defaults`` for a type, else the first of that type."""
        name = self.defaults.get(profile_type)
        if name:
            return self.get_profile(name)
        for profile in self.profiles.values():
            if profile.type == profile_type:
                return profile
        return None


def load_team_config(path: str | Path = DEFAULT_CONFIG_FILE) -> TeamConfig:
    """Read and validate a team config file.

    Raises:
        TeamConfigError: file missing, not JSON or not a team config
    """
    config_path = Path(path)
    if not config_path.is_file():
        raise TeamConfigError(f"team config not found: {config_path}")
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise TeamConfigError(f"team config is not valid JSON: {e}") from e
    if not isinstance(raw, dict):
        raise TeamConfigError("team config must be a JSON object")

    profiles_raw = raw.get(SectionType.PROFILES.value) or {}
    if not isinstance(profiles_raw, dict):
        raise TeamConfigError("profiles section must be an object")

    try:
        profiles = {
            name: Profile.model_validate({"name": name, **(body or {})})
            for name, body in profiles_raw.items()
        }
        config = TeamConfig.model_validate({**raw, SectionType.PROFILES.value: profiles})
    except (ValidationError, TypeError) as e:
        raise TeamConfigError(f"invalid team config {config_path}: {e}") from e

    logger.debug(f"Loaded team config {config_path} with {len(config.profiles)} profiles")
    return config


def connection_from_team_config(
    config: TeamConfig,
    profile_name: str | None = None,
    user: str | None = None,
    password: str | None = None,
) -> ZOSConnection:
    """Build a connection from a zosmf profile layered over the base profile.

    Credentials come from the arguments, then the profiles, then settings.

    Raises:
        TeamConfigError: no zosmf profile or incomplete connection data
    """
    zosmf = config.get_profile(profile_name) if profile_name else config.default_profile("zosmf")
    if zosmf is None:
        raise TeamConfigError("no zosmf profile in team config")
    base = config.default_profile("base")

    properties: dict[str, Any] = {}
    if base is not None:
        properties.update(base.properties)
    properties.update(zosmf.properties)

    settings = get_settings()
    try:
        return ZOSConnection(
            host=properties.get("host") or settings.zosmf_host,
            zosmf_port=int(properties.get("port") or settings.zosmf_port),
            user=user or properties.get("user") or settings.zosmf_user,
            password=password or properties.get("password") or settings.zosmf_password,
        )
    except (ValidationError, ValueError) as e:
        raise TeamConfigError(f"incomplete connection in profile {zosmf.name!r}: {e}") from e


def resolve_connection(
    config_path: str | Path | None = None,
    profile: str | None = None,
) -> ZOSConnection:
    """Connection from a team config when given, else from ZOSMF_* settings."""
    if config_path is not None:
        return connection_from_team_config(load_team_config(config_path), profile_name=profile)
    return ZOSConnection.from_settings()
