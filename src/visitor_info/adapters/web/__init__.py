"""Web adapters for Starlette/ASGI applications."""

from visitor_info.adapters.web.ignored_ip_middleware import IgnoredIpMiddleware
from visitor_info.adapters.web.request_headers import (
    header_set_from_request,
    header_set_from_scope,
    peer_ip_from_scope,
)

__all__ = [
    "IgnoredIpMiddleware",
    "header_set_from_request",
    "header_set_from_scope",
    "peer_ip_from_scope",
]
