"""Tests for the pattern registry."""

import re

import pytest

from client_parser.patterns import (
    OS_DEVICE_PATTERNS,
    BROWSER_PATTERNS,
    captured_version,
    dotted,
    search_after,
)


def test_registry_is_read_only():
    with pytest.raises(TypeError):
        OS_DEVICE_PATTERNS["linux"] = re.compile("x")
    with pytest.raises(TypeError):
        BROWSER_PATTERNS["chrome"] = re.compile("x")


@pytest.mark.parametrize("patterns", [OS_DEVICE_PATTERNS, BROWSER_PATTERNS])
def test_patterns_are_case_insensitive(patterns):
    for name, pattern in patterns.items():
        assert pattern.flags & re.IGNORECASE, name


def test_windows_phone_version_tolerates_legacy_os_token():
    assert captured_version(OS_DEVICE_PATTERNS, "windows_phone_version", "Windows Phone OS 7.5;") == "7.5"
    assert captured_version(OS_DEVICE_PATTERNS, "windows_phone_version", "Windows Phone 8.1;") == "8.1"


def test_search_after_only_looks_past_the_marker():
    ie11 = "Mozilla/5.0 (Windows NT 6.3; Trident/7.0; rv:11.0) like Gecko"
    rv_before_trident = "Mozilla/5.0 (rv:11.0; Trident/7.0)"

    assert search_after(BROWSER_PATTERNS, "trident_marker", "ie_rv", ie11).group(1) == "11.0"
    assert search_after(BROWSER_PATTERNS, "trident_marker", "ie_rv", rv_before_trident) is None
    assert search_after(BROWSER_PATTERNS, "trident_marker", "ie_rv", "Mozilla/5.0 (rv:11.0)") is None


def test_ios_version_follows_device_marker():
    ua = "Mozilla/5.0 (iPhone; CPU iPhone OS 17_0_3 like Mac OS X)"

    assert search_after(OS_DEVICE_PATTERNS, "iphone", "ios_version", ua).group(1) == "17_0_3"
    assert search_after(OS_DEVICE_PATTERNS, "ipad", "ios_version", ua) is None


def test_captured_version_returns_none_on_miss():
    assert captured_version(BROWSER_PATTERNS, "presto_engine", "Mozilla/5.0") is None


def test_gecko_engine_accepts_build_date_and_dotted_versions():
    assert captured_version(BROWSER_PATTERNS, "gecko_engine", "Gecko/20100101 Firefox/94.0") == "20100101"
    assert captured_version(BROWSER_PATTERNS, "gecko_engine", "Gecko/115.0 Firefox/115.0") == "115.0"
    assert BROWSER_PATTERNS["gecko_engine"].search("(KHTML, like Gecko) Chrome/100.0") is None


def test_tablet_indicator_tokens():
    pattern = OS_DEVICE_PATTERNS["tablet_indicator"]

    assert pattern.search("Android 11; SM-T510")
    assert pattern.search("Android 9; KFTRWI Build/PS7326")
    assert pattern.search("Android 12; Tablet")
    assert pattern.search("Android 5.1; Nexus 7 Build/LMY47V")
    assert not pattern.search("Android 10; SM-G973F")


def test_dotted():
    assert dotted("10_15_7") == "10.15.7"
    assert dotted("17.0") == "17.0"
