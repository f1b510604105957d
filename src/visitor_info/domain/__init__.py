"""Domain layer - client information models, ports and errors."""

from visitor_info.domain.errors import GeoDatabaseUnavailableError, VisitorInfoError
from visitor_info.domain.models import (
    ClientInfoPayload,
    ClientInfoRecord,
    DeviceType,
    GeoLocation,
    HeaderSet,
    IpBlocklist,
)
from visitor_info.domain.ports import GeoDatabase, IpLocalityChecker, UserAgentClassifier

__all__ = [
    "ClientInfoPayload",
    "ClientInfoRecord",
    "DeviceType",
    "GeoDatabase",
    "GeoDatabaseUnavailableError",
    "GeoLocation",
    "HeaderSet",
    "IpBlocklist",
    "IpLocalityChecker",
    "UserAgentClassifier",
    "VisitorInfoError",
]
