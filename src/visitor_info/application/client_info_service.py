"""Application service that assembles client information for a request."""

import logging
from typing import TYPE_CHECKING

from visitor_info.application.device_classifier import classify_device
from visitor_info.application.header_resolver import resolve_client_ip
from visitor_info.application.text_decoding import safe_url_decode
from visitor_info.domain.constants import USER_AGENT_HEADER
from visitor_info.domain.models import (
    ClientInfoPayload,
    ClientInfoRecord,
    HeaderSet,
    IpBlocklist,
)

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from visitor_info.application.location_resolver import LocationResolver
    from visitor_info.domain.ports import UserAgentClassifier


class ClientInfoService:
    """Service for building a ClientInfoRecord from headers and tracker payload."""

    def __init__(
        self,
        location_resolver: "LocationResolver",
        user_agent_classifier: "UserAgentClassifier",
        client_ip_header: str | None = None,
        blocklist: IpBlocklist | None = None,
    ) -> None:
        """Initialize the service.

        Args:
            location_resolver: Resolves geolocation for the client IP.
            user_agent_classifier: Derives browser and OS from the user agent.
            client_ip_header: Deployment-specific header carrying the client IP.
            blocklist: Addresses whose traffic should be ignored.
        """
        self._location_resolver = location_resolver
        self._user_agent_classifier = user_agent_classifier
        self._client_ip_header = client_ip_header
        self._blocklist = blocklist or IpBlocklist()

    def resolve_ip(self, headers: HeaderSet) -> str | None:
        """Resolve the client IP from headers using the configured custom header."""
        return resolve_client_ip(headers, self._client_ip_header)

    def is_blocked(self, ip: str | None) -> bool:
        """Check an IP against the configured blocklist."""
        return self._blocklist.is_blocked(ip)

    async def build_client_info(
        self, headers: HeaderSet, payload: ClientInfoPayload | None = None
    ) -> ClientInfoRecord:
        """Build the client information record for a request.

        Payload values take precedence over what the headers say.

        Raises:
            GeoDatabaseUnavailableError: If the geo database cannot be opened.
        """
        payload = payload or ClientInfoPayload()

        user_agent = payload.user_agent or headers.get(USER_AGENT_HEADER) or ""
        ip = payload.ip or self.resolve_ip(headers) or ""

        location = await self._location_resolver.resolve(
            ip, headers, ip_from_payload=bool(payload.ip)
        )
        details = self._user_agent_classifier.classify(user_agent)
        device = classify_device(payload.screen, details.os)

        record = ClientInfoRecord(
            user_agent=user_agent,
            browser=details.browser,
            os=details.os,
            ip=ip,
            country=safe_url_decode(location.country) if location else None,
            region=safe_url_decode(location.region) if location else None,
            city=safe_url_decode(location.city) if location else None,
            device=device,
        )
        logger.debug(
            f"Resolved client {record.ip or 'unknown'}: "
            f"{record.country or '-'} {record.device or '-'} {record.browser or '-'}"
        )
        return record
