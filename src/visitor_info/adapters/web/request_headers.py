"""Helpers for building a HeaderSet from ASGI scopes and Starlette requests.

These helpers are intentionally small so they can be used from middleware
and endpoints without coupling the core to the web framework.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from visitor_info.domain.models import HeaderSet

if TYPE_CHECKING:
    from starlette.requests import Request


def header_set_from_scope(scope: dict[str, Any] | None) -> HeaderSet:
    """Build a HeaderSet from an ASGI scope-like mapping.

    A missing or malformed scope yields an empty HeaderSet rather than raising.
    """
    if not isinstance(scope, dict):
        return HeaderSet()

    pairs: list[tuple[str | bytes, str | bytes]] = []
    for item in scope.get("headers") or []:
        if isinstance(item, (list, tuple)) and len(item) == 2:
            name, value = item
            if isinstance(name, (str, bytes)) and isinstance(value, (str, bytes)):
                pairs.append((name, value))
    return HeaderSet(pairs)  # type: ignore[arg-type]


def header_set_from_request(request: Request) -> HeaderSet:
    """Build a HeaderSet from a Starlette request."""
    return HeaderSet(request.headers.items())


def peer_ip_from_scope(scope: dict[str, Any] | None) -> str | None:
    """Return the address of the directly connected peer, if the server reports one."""
    if not isinstance(scope, dict):
        return None
    client = scope.get("client")
    if isinstance(client, (list, tuple)) and client:
        candidate = client[0]
        if isinstance(candidate, bytes):
            return candidate.decode("latin-1")
        if isinstance(candidate, str):
            return candidate
    return None
