"""Parsed IP blocklist of exact addresses and CIDR ranges."""

from __future__ import annotations

import ipaddress
import logging
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

IpNetwork = ipaddress.IPv4Network | ipaddress.IPv6Network


@dataclass(frozen=True)
class IpBlocklist:
    """Set of ignored client addresses.

    Entries are parsed once; matching never raises. A candidate that is not a
    valid IP address can still match an exact entry but never a range.
    """

    exact: frozenset[str] = field(default_factory=frozenset)
    networks: tuple[IpNetwork, ...] = ()

    @classmethod
    def parse(cls, value: str | None) -> IpBlocklist:
        """Parse a comma-separated list of IP literals and CIDR ranges.

        Malformed CIDR entries are logged and skipped.
        """
        if not value:
            return cls()

        exact: set[str] = set()
        networks: list[IpNetwork] = []
        for raw_entry in value.split(","):
            entry = raw_entry.strip()
            if not entry:
                continue
            exact.add(entry)
            if entry.find("/") > 0:
                try:
                    networks.append(ipaddress.ip_network(entry, strict=False))
                except ValueError as e:
                    logger.warning(f"Ignoring malformed CIDR blocklist entry '{entry}': {e}")

        return cls(exact=frozenset(exact), networks=tuple(networks))

    def __bool__(self) -> bool:
        return bool(self.exact)

    def is_blocked(self, ip: str | None) -> bool:
        """Return True if the IP matches an exact entry or falls in a range."""
        if not ip or not self.exact:
            return False

        if ip in self.exact:
            return True

        if not self.networks:
            return False

        try:
            address = ipaddress.ip_address(ip)
        except ValueError:
            return False

        return any(
            address.version == network.version and address in network
            for network in self.networks
        )
