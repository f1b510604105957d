"""12-factor configuration adapter using environment variables."""

import logging
from functools import cached_property
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from visitor_info.domain.constants import DEFAULT_GEOLITE_DIRECTORY, DEFAULT_GEOLITE_FILENAME
from visitor_info.domain.models import IpBlocklist

_FALSE_VALUES = ("", "0", "false", "no", "off")


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    client_ip_header: str | None = Field(
        default=None,
        description="Custom request header carrying the client IP (e.g. 'x-client-address')",
    )
    skip_location_headers: bool = Field(
        default=False,
        description="Ignore CDN geolocation headers and always use the geo database",
    )
    geolite_db_path: str | None = Field(
        default=None,
        description="Path to the GeoLite2 City database (defaults to ./geo/GeoLite2-City.mmdb)",
    )
    ignore_ip: str = Field(
        default="",
        description="Comma-separated IP addresses and CIDR ranges whose traffic is ignored",
    )
    log_level: str = Field(default="INFO", description="Log level name")

    @field_validator("client_ip_header")
    @classmethod
    def normalize_client_ip_header(cls, v: str | None) -> str | None:
        """Header names are case-insensitive; blank means not configured."""
        if v is None or not v.strip():
            return None
        return v.strip().lower()

    @field_validator("skip_location_headers", mode="before")
    @classmethod
    def parse_skip_location_headers(cls, v: Any) -> Any:
        """Treat any set value as enabled except explicit false-like words."""
        if isinstance(v, str):
            return v.strip().lower() not in _FALSE_VALUES
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate the log level is a standard logging level name."""
        level = v.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"log_level must be a logging level name, got '{v}'")
        return level

    @property
    def resolved_geolite_db_path(self) -> Path:
        """Effective geo database path."""
        if self.geolite_db_path:
            return Path(self.geolite_db_path)
        return Path.cwd() / DEFAULT_GEOLITE_DIRECTORY / DEFAULT_GEOLITE_FILENAME

    @cached_property
    def ip_blocklist(self) -> IpBlocklist:
        """Blocklist parsed from ``ignore_ip``, parsed once per config instance."""
        return IpBlocklist.parse(self.ignore_ip)
