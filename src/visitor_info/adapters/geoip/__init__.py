"""Geo database adapters."""

from visitor_info.adapters.geoip.geolite_database import GeoLiteDatabase

__all__ = ["GeoLiteDatabase"]
