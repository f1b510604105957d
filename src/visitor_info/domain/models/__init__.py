"""Domain models for client information."""

from visitor_info.domain.models.client_info_payload import ClientInfoPayload
from visitor_info.domain.models.client_info_record import ClientInfoRecord
from visitor_info.domain.models.device_type import DeviceType
from visitor_info.domain.models.geo_location import GeoDatabaseMatch, GeoLocation
from visitor_info.domain.models.header_set import HeaderSet
from visitor_info.domain.models.ip_blocklist import IpBlocklist
from visitor_info.domain.models.user_agent_details import UserAgentDetails

__all__ = [
    "ClientInfoPayload",
    "ClientInfoRecord",
    "DeviceType",
    "GeoDatabaseMatch",
    "GeoLocation",
    "HeaderSet",
    "IpBlocklist",
    "UserAgentDetails",
]
