"""Device category domain model."""

from enum import StrEnum


class DeviceType(StrEnum):
    """Device category derived from screen size and OS family."""

    DESKTOP = "desktop"
    LAPTOP = "laptop"
    TABLET = "tablet"
    MOBILE = "mobile"
