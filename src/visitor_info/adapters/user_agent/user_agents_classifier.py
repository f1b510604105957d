"""User agent classification backed by the user-agents library."""

import logging

from user_agents import parse

from visitor_info.domain.constants import AMAZON_OS, CHROME_OS
from visitor_info.domain.models import UserAgentDetails

logger = logging.getLogger(__name__)

UNKNOWN_FAMILY = "Other"

# ua-parser browser families -> analytics browser names
BROWSER_NAMES = {
    "Chrome": "chrome",
    "Chrome Mobile": "chrome",
    "Chrome Mobile WebView": "chromium-webview",
    "Chrome Mobile iOS": "crios",
    "Chromium": "chrome",
    "Edge": "edge-chromium",
    "Edge Mobile": "edge-ios",
    "Facebook": "facebook",
    "Firefox": "firefox",
    "Firefox Mobile": "firefox",
    "Firefox iOS": "fxios",
    "IE": "ie",
    "IE Mobile": "ie",
    "Instagram": "instagram",
    "Mobile Safari": "ios",
    "Mobile Safari UI/WKWebView": "ios-webview",
    "Opera": "opera",
    "Opera Mini": "opera-mini",
    "Opera Mobile": "opera",
    "Safari": "safari",
    "Samsung Internet": "samsung",
    "Silk": "silk",
    "UC Browser": "uc",
    "Yandex Browser": "yandexbrowser",
}

# ua-parser OS families -> OS names used for device classification
OS_NAMES = {
    "BeOS": "BeOS",
    "BlackBerry OS": "BlackBerry OS",
    "Chrome OS": CHROME_OS,
    "Android": "Android OS",
    "Fire OS": AMAZON_OS,
    "Kindle": AMAZON_OS,
    "Mac OS X": "Mac OS",
    "OpenBSD": "Open BSD",
    "OS/2": "OS/2",
    "QNX": "QNX",
    "Solaris": "Sun OS",
    "Windows Phone": "Windows Mobile",
    "iOS": "iOS",
}

LINUX_DISTRIBUTIONS = frozenset(
    {"Linux", "Ubuntu", "Debian", "Fedora", "Arch Linux", "Red Hat", "Mint", "Gentoo", "SUSE"}
)


class UserAgentsClassifier:
    """Classifies user agents with ua-parser data via ``user_agents``."""

    def classify(self, user_agent: str) -> UserAgentDetails:
        """Return browser and OS names, None where the user agent is unknown."""
        if not user_agent:
            return UserAgentDetails()

        parsed = parse(user_agent)
        return UserAgentDetails(
            browser=self._browser_name(parsed.browser.family),
            os=self._os_name(parsed.os.family, parsed.os.version_string, parsed.device.family),
        )

    @staticmethod
    def _browser_name(family: str | None) -> str | None:
        if not family or family == UNKNOWN_FAMILY:
            return None
        return BROWSER_NAMES.get(family, family.lower().replace(" ", "-"))

    @staticmethod
    def _os_name(family: str | None, version: str, device_family: str | None) -> str | None:
        if not family or family == UNKNOWN_FAMILY:
            return None

        # Fire tablets report themselves as Android
        if device_family and device_family.startswith("Kindle"):
            return AMAZON_OS

        if family == "Windows":
            return f"Windows {version}" if version else "Windows"

        if family in LINUX_DISTRIBUTIONS:
            return "Linux"

        name = OS_NAMES.get(family)
        if name is None:
            logger.debug(f"Unmapped OS family '{family}'")
            return family
        return name
