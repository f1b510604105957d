"""Client information record handed to the analytics layer."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from visitor_info.domain.models.device_type import DeviceType


class ClientInfoRecord(BaseModel):
    """Everything known about the client of a single request.

    ``ip`` and ``user_agent`` are empty strings when they could not be
    resolved; the remaining fields are ``None``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    user_agent: str = Field(default="", alias="userAgent")
    browser: str | None = None
    os: str | None = None
    ip: str = ""
    country: str | None = None
    region: str | None = None
    city: str | None = None
    device: DeviceType | None = None

    def to_payload(self) -> dict[str, Any]:
        """Serialize with the camelCase field names used by the ingestion layer."""
        return self.model_dump(mode="json", by_alias=True)
