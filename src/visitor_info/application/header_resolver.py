"""Client IP extraction from proxy headers."""

import re

from visitor_info.domain.constants import (
    CF_CONNECTING_IP_HEADER,
    FORWARDED_HEADER,
    IP_ADDRESS_HEADERS,
    X_FORWARDED_FOR_HEADER,
)
from visitor_info.domain.models import HeaderSet

_FORWARDED_FOR_PATTERN = re.compile(r'for="?(\[?[0-9a-fA-F:.]+\]?)')


def _forwarded_for(value: str) -> str | None:
    """Extract the ``for=`` node of an RFC 7239 Forwarded header."""
    match = _FORWARDED_FOR_PATTERN.search(value)
    if not match:
        return None
    return match.group(1).strip("[]")


def resolve_client_ip(headers: HeaderSet, custom_header: str | None = None) -> str | None:
    """Return the best guess for the client IP, or None.

    The first source that yields a value wins:

    1. ``cf-connecting-ip``
    2. the deployment's custom header, if configured
    3. the first entry of ``x-forwarded-for``
    4. the remaining known IP headers in ``IP_ADDRESS_HEADERS`` order

    The result is not validated as an IP address.
    """
    cf_ip = headers.get(CF_CONNECTING_IP_HEADER)
    if cf_ip:
        return cf_ip

    if custom_header:
        custom_ip = headers.get(custom_header)
        if custom_ip:
            return custom_ip

    forwarded_for = headers.get(X_FORWARDED_FOR_HEADER)
    if forwarded_for:
        # "client, proxy1, proxy2" - the first entry is the original client
        return forwarded_for.split(",")[0].strip()

    for name in IP_ADDRESS_HEADERS:
        value = headers.get(name)
        if not value:
            continue
        if name == FORWARDED_HEADER:
            return _forwarded_for(value) or value
        return value

    return None
