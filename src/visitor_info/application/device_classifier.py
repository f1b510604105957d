"""Device category heuristics."""

import logging

from visitor_info.domain.constants import (
    AMAZON_OS,
    CHROME_OS,
    DESKTOP_OS,
    DESKTOP_SCREEN_WIDTH,
    LAPTOP_SCREEN_WIDTH,
    MOBILE_OS,
    MOBILE_SCREEN_WIDTH,
)
from visitor_info.domain.models import DeviceType

logger = logging.getLogger(__name__)


def _screen_width(screen: str) -> float | None:
    width = screen.split("x", 1)[0].strip()
    if not width:
        # Missing width prefix (e.g. "x600") counts as zero
        return 0.0
    try:
        return float(width)
    except ValueError:
        return None


def classify_device(screen: str | None, os: str | None) -> DeviceType | None:
    """Classify the device from a ``WIDTHxHEIGHT`` screen string and OS name.

    Known OS families decide between the two categories of their family;
    otherwise the width alone decides. Returns None without screen info.
    """
    if not screen:
        return None

    width = _screen_width(screen)
    if width is None:
        logger.debug(f"Cannot classify device from screen '{screen}'")
        return None

    if os in DESKTOP_OS:
        if os == CHROME_OS or width < DESKTOP_SCREEN_WIDTH:
            return DeviceType.LAPTOP
        return DeviceType.DESKTOP

    if os in MOBILE_OS:
        if os == AMAZON_OS or width > MOBILE_SCREEN_WIDTH:
            return DeviceType.TABLET
        return DeviceType.MOBILE

    if width >= DESKTOP_SCREEN_WIDTH:
        return DeviceType.DESKTOP
    if width >= LAPTOP_SCREEN_WIDTH:
        return DeviceType.LAPTOP
    if width >= MOBILE_SCREEN_WIDTH:
        return DeviceType.TABLET
    return DeviceType.MOBILE
