"""GeoLite2 City database adapter backed by geoip2."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

import geoip2.database
import geoip2.errors
import maxminddb

from visitor_info.domain.errors import GeoDatabaseUnavailableError
from visitor_info.domain.models import GeoDatabaseMatch

logger = logging.getLogger(__name__)


class GeoLiteDatabase:
    """Lazily opened, shared GeoLite2 City reader.

    Construct one instance at startup and share it. The reader is opened on
    the first lookup; concurrent first lookups wait on a lock so the file is
    opened exactly once. A failed open is not cached and is retried on the
    next lookup.
    """

    def __init__(self, path: Path | str) -> None:
        """Initialize the database handle without opening the file.

        Args:
            path: Location of the ``.mmdb`` file.
        """
        self.path = Path(path)
        self._reader: geoip2.database.Reader | None = None
        self._open_lock: asyncio.Lock | None = None

    @property
    def is_open(self) -> bool:
        """Whether the reader has been opened."""
        return self._reader is not None

    async def open(self) -> geoip2.database.Reader:
        """Open the reader if needed and return it.

        Raises:
            GeoDatabaseUnavailableError: If the file is missing or not a valid database.
        """
        if self._reader is not None:
            return self._reader

        # Lazy init the lock so the instance can be created outside an event loop
        if self._open_lock is None:
            self._open_lock = asyncio.Lock()

        async with self._open_lock:
            if self._reader is None:
                try:
                    self._reader = await asyncio.to_thread(geoip2.database.Reader, str(self.path))
                except (OSError, ValueError, maxminddb.InvalidDatabaseError) as e:
                    logger.error(f"Failed to open geo database at {self.path}: {e}")
                    raise GeoDatabaseUnavailableError(self.path, str(e)) from e
                logger.info(f"Opened geo database at {self.path}")
            return self._reader

    async def lookup(self, ip: str) -> GeoDatabaseMatch | None:
        """Look up an IP address, returning None when it is unknown or malformed."""
        reader = await self.open()
        try:
            response = reader.city(ip)
        except geoip2.errors.AddressNotFoundError:
            return None
        except ValueError:
            logger.debug(f"Geo database rejected malformed IP '{ip}'")
            return None
        except TypeError as e:
            # Raised by geoip2 when the file is not a City database
            logger.error(f"Geo database at {self.path} cannot answer city lookups: {e}")
            raise GeoDatabaseUnavailableError(self.path, str(e)) from e

        subdivisions = response.subdivisions
        return GeoDatabaseMatch(
            country_code=response.country.iso_code,
            registered_country_code=response.registered_country.iso_code,
            subdivision_code=subdivisions[0].iso_code if subdivisions else None,
            city_name=response.city.names.get("en"),
        )

    def close(self) -> None:
        """Release the reader. A later lookup reopens it."""
        if self._reader is not None:
            self._reader.close()
            self._reader = None
            logger.info(f"Closed geo database at {self.path}")

    async def __aenter__(self) -> GeoLiteDatabase:
        """Context manager entry - open the database eagerly."""
        await self.open()
        return self

    async def __aexit__(
        self, _exc_type: type | None, _exc_val: Exception | None, _exc_tb: object
    ) -> None:
        """Context manager exit - close the reader."""
        self.close()
