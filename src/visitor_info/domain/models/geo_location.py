"""Geolocation domain models."""

from pydantic import BaseModel, ConfigDict


class GeoLocation(BaseModel):
    """Resolved location. ``None`` fields are unresolved."""

    model_config = ConfigDict(frozen=True)

    country: str | None = None
    region: str | None = None
    city: str | None = None


class GeoDatabaseMatch(BaseModel):
    """Raw fields of a geo database hit before composite codes are derived."""

    model_config = ConfigDict(frozen=True)

    country_code: str | None = None
    registered_country_code: str | None = None
    subdivision_code: str | None = None
    city_name: str | None = None
