"""Decoding helpers for header and location values."""

from urllib.parse import unquote


def decode_header(value: str | None) -> str | None:
    """Recover UTF-8 text from a header value that was decoded as Latin-1.

    Edge proxies send city and region names as raw UTF-8 bytes, which HTTP
    stacks decode one byte per character. Re-encoding as Latin-1 restores the
    bytes. Values that do not round-trip are returned unchanged.
    """
    if value is None:
        return None
    try:
        return value.encode("latin-1").decode("utf-8")
    except UnicodeError:
        return value


def safe_url_decode(value: str | None) -> str | None:
    """Percent-decode a value, returning it unchanged if it is not valid UTF-8."""
    if not value or "%" not in value:
        return value
    try:
        return unquote(value, errors="strict")
    except UnicodeDecodeError:
        return value
