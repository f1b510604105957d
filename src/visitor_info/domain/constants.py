"""Constants for client detection.

Header names are lower-case because HeaderSet lookups are case-insensitive.
"""

# Trusted edge header set by Cloudflare with the original client address
CF_CONNECTING_IP_HEADER = "cf-connecting-ip"
X_FORWARDED_FOR_HEADER = "x-forwarded-for"
FORWARDED_HEADER = "forwarded"
USER_AGENT_HEADER = "user-agent"

# Fallback headers, checked in order after the ones above
IP_ADDRESS_HEADERS = (
    "true-client-ip",
    "cf-connecting-ip",
    "fastly-client-ip",
    "x-nf-client-connection-ip",
    "do-connecting-ip",
    "x-real-ip",
    "x-appengine-user-ip",
    "x-forwarded-for",
    "forwarded",
    "x-client-ip",
    "x-cluster-client-ip",
    "x-forwarded",
)

# Geolocation headers: (country, region, city)
CLOUDFLARE_LOCATION_HEADERS = ("cf-ipcountry", "cf-region-code", "cf-ipcity")
VERCEL_LOCATION_HEADERS = (
    "x-vercel-ip-country",
    "x-vercel-ip-country-region",
    "x-vercel-ip-city",
)

DEFAULT_GEOLITE_DIRECTORY = "geo"
DEFAULT_GEOLITE_FILENAME = "GeoLite2-City.mmdb"

# Screen widths in pixels
DESKTOP_SCREEN_WIDTH = 1920
LAPTOP_SCREEN_WIDTH = 1024
MOBILE_SCREEN_WIDTH = 479

CHROME_OS = "Chrome OS"
AMAZON_OS = "Amazon OS"

DESKTOP_OS = frozenset(
    {
        "BeOS",
        CHROME_OS,
        "Linux",
        "Mac OS",
        "Open BSD",
        "OS/2",
        "QNX",
        "Sun OS",
        "Windows",
        "Windows 10",
        "Windows 11",
        "Windows 2000",
        "Windows 3.11",
        "Windows 7",
        "Windows 8",
        "Windows 8.1",
        "Windows 95",
        "Windows 98",
        "Windows ME",
        "Windows Server 2003",
        "Windows Vista",
        "Windows XP",
    }
)

MOBILE_OS = frozenset(
    {
        AMAZON_OS,
        "Android OS",
        "BlackBerry OS",
        "iOS",
        "Windows Mobile",
    }
)
