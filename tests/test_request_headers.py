"""Tests for building header sets from ASGI scopes."""

from visitor_info.adapters.web import header_set_from_scope, peer_ip_from_scope


def test_header_set_from_scope_with_full_data() -> None:
    """Given a scope with headers, then all headers are available case-insensitively."""
    scope = {
        "client": ("203.0.113.10", 54321),
        "headers": [
            (b"host", b"example.test"),
            (b"user-agent", b"TestBrowser/1.0 (TestOS)"),
            (b"X-Forwarded-For", b"8.8.8.8, 10.0.0.1"),
        ],
    }

    headers = header_set_from_scope(scope)

    assert headers.get("User-Agent") == "TestBrowser/1.0 (TestOS)"
    assert headers.get("x-forwarded-for") == "8.8.8.8, 10.0.0.1"
    assert peer_ip_from_scope(scope) == "203.0.113.10"


def test_header_set_from_scope_without_headers() -> None:
    """Given a scope without headers, then the header set is empty."""
    scope = {"client": ("198.51.100.42", 12345)}

    assert len(header_set_from_scope(scope)) == 0
    assert peer_ip_from_scope(scope) == "198.51.100.42"


def test_header_set_from_scope_with_invalid_scope() -> None:
    """Given an invalid scope, then nothing is extracted."""
    assert len(header_set_from_scope(None)) == 0
    assert peer_ip_from_scope(None) is None


def test_header_set_from_scope_skips_malformed_entries() -> None:
    """Given malformed header entries, then only valid pairs are kept."""
    scope = {"headers": [(b"x-real-ip", b"8.8.4.4"), (b"broken",), None, (1, 2)]}

    headers = header_set_from_scope(scope)

    assert dict(headers) == {"x-real-ip": "8.8.4.4"}


def test_header_values_keep_latin1_bytes() -> None:
    """Given raw UTF-8 header bytes, then they are exposed one character per byte."""
    scope = {"headers": [(b"cf-ipcity", "München".encode())]}

    headers = header_set_from_scope(scope)

    assert headers.get("cf-ipcity") == "München".encode().decode("latin-1")


def test_peer_ip_missing_client() -> None:
    """Given a scope without client, then the peer is unknown."""
    assert peer_ip_from_scope({"client": None}) is None
