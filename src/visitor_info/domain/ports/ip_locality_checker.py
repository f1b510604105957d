"""Port for detecting local network addresses."""

from abc import abstractmethod
from typing import Protocol


class IpLocalityChecker(Protocol):
    """Port for deciding whether an IP belongs to local traffic."""

    @abstractmethod
    def is_local(self, ip: str) -> bool:
        """Return True for loopback, private and link-local addresses."""
        ...
