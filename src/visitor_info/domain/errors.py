"""Domain errors."""

from pathlib import Path


class VisitorInfoError(Exception):
    """Base class for errors raised while resolving client information."""


class GeoDatabaseUnavailableError(VisitorInfoError):
    """The geolocation database could not be opened.

    Distinct from a lookup without a match, which is reported as ``None``.
    """

    def __init__(self, path: Path | str, reason: str | None = None) -> None:
        self.path = Path(path)
        self.reason = reason
        message = f"Geo database unavailable at {self.path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
