"""Network adapters."""

from visitor_info.adapters.network.ipaddress_locality_checker import IpAddressLocalityChecker

__all__ = ["IpAddressLocalityChecker"]
