"""Client-supplied overrides for detected request metadata."""

from pydantic import BaseModel, ConfigDict, Field


class ClientInfoPayload(BaseModel):
    """Optional values sent by the tracker that take precedence over headers."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    ip: str | None = None
    user_agent: str | None = Field(default=None, alias="userAgent")
    screen: str | None = None
