"""Application layer - client information resolution."""

from visitor_info.application.client_info_service import ClientInfoService
from visitor_info.application.device_classifier import classify_device
from visitor_info.application.header_resolver import resolve_client_ip
from visitor_info.application.location_resolver import (
    LocationResolver,
    get_region_code,
    strip_port,
)
from visitor_info.application.text_decoding import decode_header, safe_url_decode

__all__ = [
    "ClientInfoService",
    "LocationResolver",
    "classify_device",
    "decode_header",
    "get_region_code",
    "resolve_client_ip",
    "safe_url_decode",
    "strip_port",
]
