"""Port for offline IP geolocation lookups."""

from abc import abstractmethod
from typing import Protocol

from visitor_info.domain.models import GeoDatabaseMatch


class GeoDatabase(Protocol):
    """Port for an IP geolocation database."""

    @abstractmethod
    async def lookup(self, ip: str) -> GeoDatabaseMatch | None:
        """Look up an IP address.

        Returns:
            The match, or None if the address is unknown or malformed.

        Raises:
            GeoDatabaseUnavailableError: If the database cannot be opened.
        """
        ...
