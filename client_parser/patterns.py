# client_parser/patterns.py

import re
from types import MappingProxyType
from typing import Mapping, Optional


def _compile(pattern: str) -> re.Pattern:
    return re.compile(pattern, re.IGNORECASE)


# OS / device signals. Version-bearing patterns capture it in group 1.
# Markers and versions are separate patterns (no ".*" between them) so a
# scan stays linear in the input length.
OS_DEVICE_PATTERNS: Mapping[str, re.Pattern] = MappingProxyType({
    "windows_phone": _compile(r"Windows Phone"),
    # "Windows Phone 8.1" and legacy "Windows Phone OS 7.5"
    "windows_phone_version": _compile(r"Windows Phone (?:OS )?([\d.]+)"),

    # iPadOS can also claim "Macintosh; Intel Mac OS X", so these run before macOS
    "ipad": _compile(r"iPad"),
    "iphone": _compile(r"iPhone"),
    "ipod": _compile(r"iPod"),
    # searched after the device marker: "CPU iPhone OS 17_0_3", "CPU OS 16_6"
    "ios_version": _compile(r"(?:OS|CPU) ([\d_.]+)"),
    "ios_marker": _compile(r"iPad|iPhone"),

    "android": _compile(r"Android ([\d.]+)"),
    "android_marker": _compile(r"Android"),
    "mobile_indicator": _compile(r"Mobi"),
    # Galaxy Tab (SM-T...), Kindle Fire (KF..), Nexus tablets
    "tablet_indicator": _compile(r"Tablet|SM-T\d+|\bKF[A-Z0-9]{2,}|Nexus (?:7|10)\b"),

    "windows_nt": _compile(r"Windows NT ([\d.]+)"),
    "macintosh": _compile(r"Macintosh"),
    # searched after "Macintosh"
    "mac_os_x": _compile(r"Mac OS X ([\d_.]+)"),
    "linux": _compile(r"Linux"),
})

# Browser / engine signals
BROWSER_PATTERNS: Mapping[str, re.Pattern] = MappingProxyType({
    # "Edg/" (Chromium desktop), "EdgA/" (Android), "Edge/" (EdgeHTML)
    "edge": _compile(r"Edg[eA]?/([\d.]+)"),
    "opera": _compile(r"(?:OPR|Opera)/([\d.]+)"),
    "firefox": _compile(r"Firefox/([\d.]+)"),
    "chrome": _compile(r"(?:Chrome|CriOS|Chromium)/([\d.]+)"),
    "safari_marker": _compile(r"Safari/"),
    # Safari/ only carries the WebKit build, Version/ is the user-facing one.
    # A Safari/ token must follow it.
    "safari_version": _compile(r"Version/([\d.]+)"),
    # IE <= 10
    "msie": _compile(r"MSIE ([\d.]+)"),
    # IE 11 carries its version in the "rv:" token after Trident/
    "trident_marker": _compile(r"Trident/"),
    "ie_rv": _compile(r"rv:([\d.]+)"),

    "webkit_engine": _compile(r"AppleWebKit/([\d.]+)"),
    # build date (20100101) or dotted number
    "gecko_engine": _compile(r"Gecko/(\d{8}|\d+\.\d+)"),
    "trident_engine": _compile(r"Trident/([\d.]+)"),
    "presto_engine": _compile(r"Presto/([\d.]+)"),
})


def search_after(patterns: Mapping[str, re.Pattern], marker: str, name: str,
                 user_agent: str) -> Optional[re.Match]:
    """
    Find the marker, then search the named pattern in the text after it.

    Equivalent to "marker.*pattern" without the backtracking: anything
    after a later marker is also after the first one.
    """
    found = patterns[marker].search(user_agent)
    if not found:
        return None
    return patterns[name].search(user_agent, found.end())


def captured_version(patterns: Mapping[str, re.Pattern], name: str, user_agent: str):
    """First non-empty capture group of the named pattern, or None."""
    match = patterns[name].search(user_agent)
    if not match:
        return None
    return next((group for group in match.groups() if group), None)


def dotted(version: str) -> str:
    """Normalize "17_0_3" style tokens to "17.0.3"."""
    return version.replace("_", ".")
