"""Case-insensitive, read-only view over inbound request headers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping


def _decode(value: str | bytes) -> str:
    # ASGI servers deliver header bytes as latin-1
    if isinstance(value, bytes):
        return value.decode("latin-1")
    return str(value)


class HeaderSet(Mapping[str, str]):
    """Immutable mapping of lower-cased header names to values.

    ``get`` returns ``None`` for an absent header, so an empty value (``""``)
    stays distinguishable from absence. When a header name repeats, the first
    value wins.
    """

    __slots__ = ("_headers",)

    def __init__(
        self, headers: Mapping[str, str] | Iterable[tuple[str, str]] | None = None
    ) -> None:
        items = headers.items() if isinstance(headers, Mapping) else (headers or ())
        normalized: dict[str, str] = {}
        for name, value in items:
            normalized.setdefault(_decode(name).lower(), _decode(value))
        self._headers = normalized

    @classmethod
    def from_raw(cls, raw_headers: Iterable[tuple[bytes, bytes]]) -> HeaderSet:
        """Build from ASGI-style ``(name, value)`` byte pairs."""
        return cls((_decode(name), _decode(value)) for name, value in raw_headers)

    def __getitem__(self, name: str) -> str:
        return self._headers[name.lower()]

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._headers

    def __iter__(self) -> Iterator[str]:
        return iter(self._headers)

    def __len__(self) -> int:
        return len(self._headers)

    def __repr__(self) -> str:
        return f"HeaderSet({self._headers!r})"
