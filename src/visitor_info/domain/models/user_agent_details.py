"""User agent classification result."""

from pydantic import BaseModel, ConfigDict


class UserAgentDetails(BaseModel):
    """Browser and OS names reported by a user agent classifier."""

    model_config = ConfigDict(frozen=True)

    browser: str | None = None
    os: str | None = None
