"""Behavior-focused tests for the ignored IP middleware."""

import pytest
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import PlainTextResponse
from starlette.routing import Route
from starlette.testclient import TestClient

from visitor_info.adapters.web import IgnoredIpMiddleware
from visitor_info.application import resolve_client_ip
from visitor_info.domain.models import HeaderSet, IpBlocklist


async def _collect(request: Request) -> PlainTextResponse:
    return PlainTextResponse("collected")


def _client(blocklist: IpBlocklist) -> TestClient:
    app = Starlette(routes=[Route("/api/send", _collect, methods=["POST"])])
    app.add_middleware(
        IgnoredIpMiddleware,
        ip_resolver=lambda headers: resolve_client_ip(headers),
        blocklist=blocklist,
    )
    return TestClient(app)


@pytest.fixture
def client() -> TestClient:
    """Create a test client ignoring one range and one address."""
    return _client(IpBlocklist.parse("10.0.0.0/8, 8.8.8.8"))


def test_blocked_ip_gets_empty_response(client: TestClient) -> None:
    """Given a request from a blocked range, then the app is not called."""
    response = client.post("/api/send", headers={"X-Forwarded-For": "10.1.2.3"})

    assert response.status_code == 200
    assert response.json() == {}


def test_exact_blocked_ip_gets_empty_response(client: TestClient) -> None:
    """Given a request from an exact blocked IP, then the app is not called."""
    response = client.post("/api/send", headers={"CF-Connecting-IP": "8.8.8.8"})

    assert response.json() == {}


def test_allowed_ip_reaches_app(client: TestClient) -> None:
    """Given a request from an allowed IP, then it reaches the app."""
    response = client.post("/api/send", headers={"X-Forwarded-For": "1.1.1.1"})

    assert response.status_code == 200
    assert response.text == "collected"


def test_peer_address_used_without_headers() -> None:
    """Given no IP headers, then the connection peer is checked."""
    client = _client(IpBlocklist.parse("testclient"))

    response = client.post("/api/send")

    assert response.json() == {}


def test_empty_blocklist_passes_everything() -> None:
    """Given no blocklist entries, then every request reaches the app."""
    client = _client(IpBlocklist())

    response = client.post("/api/send", headers={"X-Forwarded-For": "10.1.2.3"})

    assert response.text == "collected"


def test_resolver_receives_header_set() -> None:
    """Given a custom resolver, then it is called with the request headers."""
    seen: list[HeaderSet] = []

    def resolver(headers: HeaderSet) -> str | None:
        seen.append(headers)
        return headers.get("x-client-address")

    app = Starlette(routes=[Route("/api/send", _collect, methods=["POST"])])
    app.add_middleware(
        IgnoredIpMiddleware, ip_resolver=resolver, blocklist=IpBlocklist.parse("9.9.9.9")
    )

    response = TestClient(app).post("/api/send", headers={"X-Client-Address": "9.9.9.9"})

    assert response.json() == {}
    assert seen[0].get("X-CLIENT-ADDRESS") == "9.9.9.9"


def test_payload_ip_is_not_checked_by_middleware() -> None:
    """Given an allowed header IP and a blocked IP in the body, then the request reaches the app."""
    client = _client(IpBlocklist.parse("10.0.0.0/8"))

    response = client.post(
        "/api/send", headers={"X-Forwarded-For": "1.1.1.1"}, json={"ip": "10.1.2.3"}
    )

    assert response.text == "collected"
