"""Ports (interfaces) for the ports-and-adapters architecture."""

from visitor_info.domain.ports.geo_database import GeoDatabase
from visitor_info.domain.ports.ip_locality_checker import IpLocalityChecker
from visitor_info.domain.ports.user_agent_classifier import UserAgentClassifier

__all__ = [
    "GeoDatabase",
    "IpLocalityChecker",
    "UserAgentClassifier",
]
