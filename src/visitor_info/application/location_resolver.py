"""Location resolution from edge headers or the geo database."""

import ipaddress
import logging
from typing import TYPE_CHECKING

from visitor_info.application.text_decoding import decode_header
from visitor_info.domain.constants import (
    CLOUDFLARE_LOCATION_HEADERS,
    VERCEL_LOCATION_HEADERS,
)
from visitor_info.domain.models import GeoLocation, HeaderSet

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from visitor_info.domain.ports import GeoDatabase, IpLocalityChecker

_EDGE_LOCATION_HEADERS = (
    ("cloudflare", CLOUDFLARE_LOCATION_HEADERS),
    ("vercel", VERCEL_LOCATION_HEADERS),
)


def get_region_code(country: str | None, region: str | None) -> str | None:
    """Compose an ISO 3166-2 style region code such as ``US-CA``.

    Regions that already carry a country prefix are returned unchanged.
    """
    if not country or not region:
        return None
    return region if "-" in region else f"{country}-{region}"


def strip_port(ip: str) -> str:
    """Remove a trailing ``:port`` from an address taken from a header.

    Handles ``1.2.3.4:8080`` and ``[2001:db8::1]:8080``; bare IPv6 addresses
    are left alone.
    """
    candidate = ip.strip()
    if candidate.startswith("["):
        host, _, _ = candidate[1:].partition("]")
        return host
    if candidate.count(":") == 1:
        return candidate.split(":", 1)[0]
    return candidate


class LocationResolver:
    """Resolves a client location, preferring trusted edge headers."""

    def __init__(
        self,
        geo_database: "GeoDatabase",
        locality_checker: "IpLocalityChecker",
        skip_location_headers: bool = False,
    ) -> None:
        """Initialize the resolver.

        Args:
            geo_database: Offline database used when no edge headers apply.
            locality_checker: Decides which addresses are local traffic.
            skip_location_headers: Ignore edge geolocation headers entirely.
        """
        self._geo_database = geo_database
        self._locality_checker = locality_checker
        self._skip_location_headers = skip_location_headers

    async def resolve(
        self, ip: str | None, headers: HeaderSet, ip_from_payload: bool
    ) -> GeoLocation | None:
        """Resolve the location of ``ip``.

        Edge headers describe the connection seen by the proxy, so they are
        only used when the IP was not supplied by the client.

        Raises:
            GeoDatabaseUnavailableError: If the database is needed but cannot be opened.
        """
        address = strip_port(ip) if ip else ""

        if address and self._locality_checker.is_local(address):
            return None

        if not ip_from_payload and not self._skip_location_headers:
            location = self._from_edge_headers(headers)
            if location is not None:
                return location

        return await self._from_database(address)

    def _from_edge_headers(self, headers: HeaderSet) -> GeoLocation | None:
        for provider, (country_header, region_header, city_header) in _EDGE_LOCATION_HEADERS:
            if not headers.get(country_header):
                continue
            country = decode_header(headers.get(country_header))
            region = decode_header(headers.get(region_header))
            city = decode_header(headers.get(city_header))
            logger.debug(f"Resolved location from {provider} headers")
            return GeoLocation(
                country=country,
                region=get_region_code(country, region),
                city=city,
            )
        return None

    async def _from_database(self, address: str) -> GeoLocation | None:
        if not address:
            return None

        try:
            ipaddress.ip_address(address)
        except ValueError:
            logger.debug(f"Skipping database lookup for malformed IP '{address}'")
            return None

        match = await self._geo_database.lookup(address)
        if match is None:
            return None

        country = match.country_code or match.registered_country_code
        return GeoLocation(
            country=country,
            region=get_region_code(country, match.subdivision_code),
            city=match.city_name,
        )
