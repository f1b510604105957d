"""Local traffic detection using the standard ipaddress module."""

import ipaddress

# Loopback, RFC 1918 / ULA private, link-local and unspecified ranges
LOCAL_NETWORKS = tuple(
    ipaddress.ip_network(network)
    for network in (
        "127.0.0.0/8",
        "10.0.0.0/8",
        "172.16.0.0/12",
        "192.168.0.0/16",
        "169.254.0.0/16",
        "0.0.0.0/8",
        "::1/128",
        "fc00::/7",
        "fe80::/10",
        "::/128",
    )
)


class IpAddressLocalityChecker:
    """Treats addresses in ``LOCAL_NETWORKS`` as local traffic.

    Strings that are not IP addresses, other than ``localhost``, are not local.
    """

    def is_local(self, ip: str) -> bool:
        """Return True if the address belongs to local traffic."""
        if ip.strip().lower() == "localhost":
            return True
        try:
            address = ipaddress.ip_address(ip.strip())
        except ValueError:
            return False

        if isinstance(address, ipaddress.IPv6Address) and address.ipv4_mapped:
            address = address.ipv4_mapped

        return any(
            address.version == network.version and address in network
            for network in LOCAL_NETWORKS
        )
