"""Composition root wiring configuration, adapters and services."""

import logging
import sys

from visitor_info.adapters.config import AppConfig
from visitor_info.adapters.geoip import GeoLiteDatabase
from visitor_info.adapters.network import IpAddressLocalityChecker
from visitor_info.adapters.user_agent import UserAgentsClassifier
from visitor_info.application import ClientInfoService, LocationResolver
from visitor_info.domain.ports import GeoDatabase

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging to stderr."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def build_client_info_service(
    config: AppConfig, geo_database: GeoDatabase | None = None
) -> ClientInfoService:
    """Create a ClientInfoService from configuration.

    Args:
        config: Application configuration.
        geo_database: Database to use instead of opening the configured GeoLite2 file.
    """
    if geo_database is None:
        geo_database = GeoLiteDatabase(config.resolved_geolite_db_path)

    location_resolver = LocationResolver(
        geo_database=geo_database,
        locality_checker=IpAddressLocalityChecker(),
        skip_location_headers=config.skip_location_headers,
    )
    blocklist = config.ip_blocklist
    logger.debug(
        f"Client info service: custom IP header={config.client_ip_header or '-'}, "
        f"skip location headers={config.skip_location_headers}, "
        f"blocklist entries={len(blocklist.exact)}"
    )
    return ClientInfoService(
        location_resolver=location_resolver,
        user_agent_classifier=UserAgentsClassifier(),
        client_ip_header=config.client_ip_header,
        blocklist=blocklist,
    )
