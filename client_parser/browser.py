# client_parser/browser.py

from typing import Optional
import re
import logging

from client_parser.patterns import BROWSER_PATTERNS as P, captured_version, search_after
from client_parser.rules import Rule, first_match
from client_parser.schemas import (
    BrowserRecord,
    EngineRecord,
    BrowserPartial,
    UNKNOWN,
    BROWSER_EDGE,
    BROWSER_OPERA,
    BROWSER_FIREFOX,
    BROWSER_CHROME,
    BROWSER_SAFARI,
    BROWSER_IE,
    ENGINE_BLINK,
    ENGINE_GECKO,
    ENGINE_WEBKIT,
    ENGINE_TRIDENT,
    ENGINE_PRESTO,
)

logger = logging.getLogger(__name__)


def _engine(name: str, token: str, user_agent: str) -> EngineRecord:
    """Engine name is fixed by the browser rule, version read from the given token."""
    return EngineRecord(name=name, version=captured_version(P, token, user_agent) or UNKNOWN)


def _partial(rule: str, browser_name: str, version: str, engine: EngineRecord) -> BrowserPartial:
    return BrowserPartial(
        browser=BrowserRecord(name=browser_name, version=version),
        engine=engine,
        rule=rule,
    )


def _build_edge(match: re.Match, user_agent: str) -> BrowserPartial:
    # Chromium Edge only advertises the AppleWebKit token, relabelled as Blink
    return _partial("edge", BROWSER_EDGE, match.group(1),
                    _engine(ENGINE_BLINK, "webkit_engine", user_agent))


def _build_opera(match: re.Match, user_agent: str) -> BrowserPartial:
    if P["presto_engine"].search(user_agent):
        engine = _engine(ENGINE_PRESTO, "presto_engine", user_agent)
    else:
        engine = _engine(ENGINE_BLINK, "webkit_engine", user_agent)
    return _partial("opera", BROWSER_OPERA, match.group(1), engine)


def _build_firefox(match: re.Match, user_agent: str) -> BrowserPartial:
    return _partial("firefox", BROWSER_FIREFOX, match.group(1),
                    _engine(ENGINE_GECKO, "gecko_engine", user_agent))


def _build_chrome(match: re.Match, user_agent: str) -> BrowserPartial:
    return _partial("chrome", BROWSER_CHROME, match.group(1),
                    _engine(ENGINE_BLINK, "webkit_engine", user_agent))


def _match_safari(user_agent: str) -> Optional[re.Match]:
    if not P["safari_marker"].search(user_agent):
        return None
    version = P["safari_version"].search(user_agent)
    if not version or not P["safari_marker"].search(user_agent, version.end()):
        return None
    return version


def _build_safari(match: re.Match, user_agent: str) -> BrowserPartial:
    return _partial("safari", BROWSER_SAFARI, match.group(1),
                    _engine(ENGINE_WEBKIT, "webkit_engine", user_agent))


def _match_internet_explorer(user_agent: str) -> Optional[re.Match]:
    return P["msie"].search(user_agent) or search_after(P, "trident_marker", "ie_rv", user_agent)


def _build_internet_explorer(match: re.Match, user_agent: str) -> BrowserPartial:
    return _partial("internet_explorer", BROWSER_IE, match.group(1),
                    _engine(ENGINE_TRIDENT, "trident_engine", user_agent))


# Most specific first: Chromium browsers all carry "Chrome" and "Safari" too
BROWSER_RULES = (
    Rule("edge", P["edge"].search, _build_edge),
    Rule("opera", P["opera"].search, _build_opera),
    Rule("firefox", P["firefox"].search, _build_firefox),
    Rule("chrome", P["chrome"].search, _build_chrome),
    Rule("safari", _match_safari, _build_safari),
    Rule("internet_explorer", _match_internet_explorer, _build_internet_explorer),
)


def detect_browser(user_agent: str) -> BrowserPartial:
    """Classify browser and rendering engine; unknown partial on a miss."""
    rule, partial = first_match(BROWSER_RULES, user_agent or "")

    if rule is None:
        logger.debug(f"No browser rule matched: {user_agent!r}")
        return BrowserPartial()

    return partial
