"""z/OSMF connection information."""

from __future__ import annotations

from pydantic import BaseModel, Field, ValidationError, field_validator

from zosmf_sdk.config.settings import get_settings
from zosmf_sdk.shared.exceptions import InvalidParameterError


class ZOSConnection(BaseModel):
    """Host, port and credentials of a z/OSMF instance."""

    host: str
    zosmf_port: int = Field(default=443, gt=0, lt=65536, alias="port")
    user: str
    password: str = Field(repr=False)

    model_config = {"populate_by_name": True, "frozen": True}

    @field_validator("host", "user")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("must not be empty")
        return value.strip()

    @field_validator("password")
    @classmethod
    def _password_not_blank(cls, value: str) -> str:
        # not stripped
        if not value or not value.strip():
            raise ValueError("must not be empty")
        return value

    @property
    def base_url(self) -> str:
        return f"https://{self.host}:{self.zosmf_port}"

    @classmethod
    def from_settings(cls) -> ZOSConnection:
        """Build a connection from ZOSMF_* environment settings.

        Raises:
            InvalidParameterError: when host or credentials are not configured or the port is out of range
        """
        settings = get_settings()
        missing = [
            name
            for name, value in (
                ("ZOSMF_HOST", settings.zosmf_host),
                ("ZOSMF_USER", settings.zosmf_user),
                ("ZOSMF_PASSWORD", settings.zosmf_password),
            )
            if not value
        ]
        if missing:
            raise InvalidParameterError(f"connection not configured: {', '.join(missing)}")
        try:
            return cls(
                host=settings.zosmf_host,
                zosmf_port=settings.zosmf_port,
                user=settings.zosmf_user,
                password=settings.zosmf_password,
            )
        except ValidationError as e:
            raise InvalidParameterError(f"invalid connection settings: {e}") from e
