"""Tests for local traffic detection."""

import pytest

from visitor_info.adapters.network import IpAddressLocalityChecker


@pytest.fixture
def checker() -> IpAddressLocalityChecker:
    """Create a locality checker."""
    return IpAddressLocalityChecker()


@pytest.mark.parametrize(
    "ip",
    [
        "127.0.0.1",
        "::1",
        "10.1.2.3",
        "172.16.5.4",
        "192.168.1.10",
        "169.254.0.1",
        "0.0.0.0",
        "::",
        "fd00::1",
        "fe80::1",
        "::ffff:192.168.1.1",
        "localhost",
    ],
)
def test_local_addresses(checker: IpAddressLocalityChecker, ip: str) -> None:
    """Given loopback, private, link-local or unspecified addresses, then they are local."""
    assert checker.is_local(ip) is True


@pytest.mark.parametrize(
    "ip",
    [
        "8.8.8.8",
        "2001:0:4136:e378:8000:63bf:3fff:fdd2",
        "198.18.0.5",
        "240.0.0.1",
        "172.32.0.1",
        "2606:4700:4700::1111",
    ],
)
def test_routable_addresses_are_not_local(checker: IpAddressLocalityChecker, ip: str) -> None:
    """Given routable addresses, including Teredo and benchmark ranges, then they are not local."""
    assert checker.is_local(ip) is False


def test_non_ip_strings_are_not_local(checker: IpAddressLocalityChecker) -> None:
    """Given a string that is not an IP, then it is not local."""
    assert checker.is_local("not-an-ip") is False
