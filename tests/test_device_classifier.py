"""Tests for device classification."""

import pytest

from visitor_info.application import classify_device
from visitor_info.domain.models import DeviceType


@pytest.mark.parametrize(
    ("screen", "os", "expected"),
    [
        ("1920x1080", "Windows", DeviceType.DESKTOP),
        ("1366x768", "Windows 10", DeviceType.LAPTOP),
        ("2560x1440", "Mac OS", DeviceType.DESKTOP),
        ("800x600", "Chrome OS", DeviceType.LAPTOP),
        ("2560x1600", "Chrome OS", DeviceType.LAPTOP),
        ("375x667", "iOS", DeviceType.MOBILE),
        ("768x1024", "iOS", DeviceType.TABLET),
        ("1024x768", "Amazon OS", DeviceType.TABLET),
        ("320x480", "Amazon OS", DeviceType.TABLET),
        ("479x800", "Android OS", DeviceType.MOBILE),
    ],
)
def test_known_os_families(screen: str, os: str, expected: DeviceType) -> None:
    """Given a known OS family, when classifying, then the family decides the categories."""
    assert classify_device(screen, os) == expected


@pytest.mark.parametrize(
    ("screen", "expected"),
    [
        ("1920x1080", DeviceType.DESKTOP),
        ("1024x768", DeviceType.LAPTOP),
        ("1023x768", DeviceType.TABLET),
        ("479x640", DeviceType.TABLET),
        ("478x640", DeviceType.MOBILE),
    ],
)
def test_unknown_os_uses_width_thresholds(screen: str, expected: DeviceType) -> None:
    """Given an unknown OS, when classifying, then width thresholds decide."""
    assert classify_device(screen, "Haiku") == expected


def test_unknown_os_none_uses_width() -> None:
    """Given no OS at all, when classifying, then width alone decides."""
    assert classify_device("2560x1440", None) == DeviceType.DESKTOP


@pytest.mark.parametrize("screen", [None, ""])
def test_missing_screen_returns_none(screen: str | None) -> None:
    """Given no screen info, when classifying, then no device is returned."""
    assert classify_device(screen, "Windows") is None


def test_unparseable_screen_returns_none() -> None:
    """Given a screen without a numeric width, when classifying, then no device is returned."""
    assert classify_device("widexhigh", "Windows") is None


@pytest.mark.parametrize(
    ("os", "expected"),
    [(None, DeviceType.MOBILE), ("Windows 10", DeviceType.LAPTOP), ("iOS", DeviceType.MOBILE)],
)
def test_missing_width_counts_as_zero(os: str | None, expected: DeviceType) -> None:
    """Given a screen without a width prefix, when classifying, then the width is zero."""
    assert classify_device("x600", os) == expected
