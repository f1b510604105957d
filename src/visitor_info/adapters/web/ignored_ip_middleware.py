"""Middleware that drops requests from blocklisted client IPs."""

import logging
from collections.abc import Awaitable, Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from visitor_info.adapters.web.request_headers import header_set_from_request, peer_ip_from_scope
from visitor_info.domain.models import HeaderSet, IpBlocklist

logger = logging.getLogger(__name__)

IpResolver = Callable[[HeaderSet], str | None]


class IgnoredIpMiddleware(BaseHTTPMiddleware):
    """Answers requests from ignored IPs without calling the wrapped app.

    Ignored traffic gets an empty ``200`` JSON response so trackers do not retry.

    Only the IP from headers or the connection peer is checked here. When the
    tracker payload supplies its own IP, the endpoint must call
    ``ClientInfoService.is_blocked`` after parsing the payload.
    """

    def __init__(
        self,
        app: Callable,
        ip_resolver: IpResolver,
        blocklist: IpBlocklist,
    ) -> None:
        """Initialize the middleware.

        Args:
            app: The ASGI application to wrap.
            ip_resolver: Resolves the client IP from request headers.
            blocklist: Addresses whose requests are dropped.
        """
        super().__init__(app)
        self.ip_resolver = ip_resolver
        self.blocklist = blocklist
        if blocklist:
            logger.info(f"Ignoring traffic from {len(blocklist.exact)} configured IP entries")

    def _client_ip(self, request: Request) -> str | None:
        ip = self.ip_resolver(header_set_from_request(request))
        return ip or peer_ip_from_scope(request.scope)

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        """Short-circuit blocked clients, pass everything else through."""
        if self.blocklist:
            client_ip = self._client_ip(request)
            if self.blocklist.is_blocked(client_ip):
                logger.debug(f"Dropping request from ignored IP {client_ip}")
                return JSONResponse({})

        response: Response = await call_next(request)
        return response
