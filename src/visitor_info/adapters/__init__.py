"""Adapters layer - external system integrations."""

from visitor_info.adapters.config import AppConfig
from visitor_info.adapters.geoip import GeoLiteDatabase
from visitor_info.adapters.network import IpAddressLocalityChecker
from visitor_info.adapters.user_agent import UserAgentsClassifier

__all__ = [
    "AppConfig",
    "GeoLiteDatabase",
    "IpAddressLocalityChecker",
    "UserAgentsClassifier",
]
