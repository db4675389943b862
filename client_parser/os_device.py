# client_parser/os_device.py

from typing import Optional
import re
import logging

from client_parser.patterns import OS_DEVICE_PATTERNS as P, captured_version, dotted, search_after
from client_parser.rules import Rule, first_match
from client_parser.schemas import (
    DeviceRecord,
    OSRecord,
    OSDevicePartial,
    ANDROID,
    IOS,
    WINDOWS_PHONE,
    PC,
    OS_WINDOWS_PHONE,
    OS_IOS,
    OS_ANDROID,
    OS_WINDOWS,
    OS_MACOS,
    OS_LINUX,
)

logger = logging.getLogger(__name__)


def _partial(rule: str, device_type: str, device_name: str, os_name: str,
             os_version: Optional[str] = None, is_mobile: bool = False,
             is_tablet: bool = False) -> OSDevicePartial:
    return OSDevicePartial(
        device=DeviceRecord(type=device_type, name=device_name),
        os=OSRecord(name=os_name, version=os_version),
        is_mobile=is_mobile,
        is_tablet=is_tablet,
        rule=rule,
    )


# --- Windows Phone ---

def _build_windows_phone(match: re.Match, user_agent: str) -> OSDevicePartial:
    # Version is optional, the marker alone is enough
    version = captured_version(P, "windows_phone_version", user_agent)
    return _partial("windows_phone", WINDOWS_PHONE, "Windows Phone", OS_WINDOWS_PHONE,
                    os_version=version, is_mobile=True)


# --- iOS ---

def _ios_matcher(marker: str):
    def match(user_agent: str) -> Optional[re.Match]:
        return search_after(P, marker, "ios_version", user_agent)
    return match


def _ios_builder(rule: str, device_name: str, is_tablet: bool):
    def build(match: re.Match, user_agent: str) -> OSDevicePartial:
        return _partial(rule, IOS, device_name, OS_IOS,
                        os_version=dotted(match.group(1)),
                        is_mobile=True, is_tablet=is_tablet)
    return build


# --- Android ---

def _match_android(user_agent: str) -> Optional[re.Match]:
    # Windows Phone UAs embed "Android" for compatibility
    if P["windows_phone"].search(user_agent):
        return None
    return P["android"].search(user_agent)


def is_android_tablet(user_agent: str) -> bool:
    """No "Mobi" token, or an explicit tablet token, means tablet."""
    return (
        not P["mobile_indicator"].search(user_agent)
        or bool(P["tablet_indicator"].search(user_agent))
    )


def _build_android(match: re.Match, user_agent: str) -> OSDevicePartial:
    tablet = is_android_tablet(user_agent)
    return _partial("android", ANDROID, "Android Tablet" if tablet else "Android Phone",
                    OS_ANDROID, os_version=match.group(1),
                    is_mobile=True, is_tablet=tablet)


# --- Desktop ---

def _build_windows(match: re.Match, user_agent: str) -> OSDevicePartial:
    return _partial("windows", PC, "Windows PC", OS_WINDOWS, os_version=match.group(1))


def _match_macos(user_agent: str) -> Optional[re.Match]:
    # Older iOS UAs carry "like Mac OS X"
    if P["ios_marker"].search(user_agent):
        return None
    return search_after(P, "macintosh", "mac_os_x", user_agent)


def _build_macos(match: re.Match, user_agent: str) -> OSDevicePartial:
    return _partial("macos", PC, "Mac", OS_MACOS, os_version=dotted(match.group(1)))


def _match_linux(user_agent: str) -> Optional[re.Match]:
    if P["android_marker"].search(user_agent):
        return None
    return P["linux"].search(user_agent)


def _build_linux(match: re.Match, user_agent: str) -> OSDevicePartial:
    # Kernel/distro version is not reliably present - left unset
    return _partial("linux", PC, "Linux PC", OS_LINUX)


# Rules matched in order - first match wins
OS_DEVICE_RULES = (
    Rule("windows_phone", P["windows_phone"].search, _build_windows_phone),
    Rule("ipad", _ios_matcher("ipad"), _ios_builder("ipad", "iPad", is_tablet=True)),
    Rule("iphone", _ios_matcher("iphone"), _ios_builder("iphone", "iPhone", is_tablet=False)),
    Rule("ipod", _ios_matcher("ipod"), _ios_builder("ipod", "iPod", is_tablet=False)),
    Rule("android", _match_android, _build_android),
    Rule("windows", P["windows_nt"].search, _build_windows),
    Rule("macos", _match_macos, _build_macos),
    Rule("linux", _match_linux, _build_linux),
)


def detect_os_and_device(user_agent: str) -> OSDevicePartial:
    """
    Classify OS and device form factor.

    Returns an all-unknown partial if no rule matches.
    """
    rule, partial = first_match(OS_DEVICE_RULES, user_agent or "")

    if rule is None:
        logger.debug(f"No OS/device rule matched: {user_agent!r}")
        return OSDevicePartial()

    return partial
