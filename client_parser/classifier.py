# client_parser/classifier.py

from typing import Dict, Optional, Tuple
import logging

from client_parser.browser import detect_browser
from client_parser.config import settings
from client_parser.os_device import detect_os_and_device
from client_parser.schemas import ClassificationResult, LegacyDeviceInfo, UNKNOWN

logger = logging.getLogger(__name__)


def classify(user_agent: Optional[str], platform: Optional[str] = None) -> ClassificationResult:
    """
    Classify a user agent string into device, OS, browser and engine facts.

    The platform hint is copied verbatim and does not influence
    classification. Only the first settings.max_user_agent_length
    characters are scanned; the result keeps the full string. Never
    raises - unrecognised or empty input yields the all-unknown record.
    """
    user_agent = user_agent or ""

    scanned = user_agent[:settings.max_user_agent_length]
    if len(scanned) < len(user_agent):
        logger.debug(f"User agent of {len(user_agent)} chars truncated to {len(scanned)} for classification")

    os_device = detect_os_and_device(scanned)
    browser = detect_browser(scanned)

    logger.debug(
        f"Classified {user_agent[:60]!r}: os rule={os_device.rule}, browser rule={browser.rule}"
    )

    return ClassificationResult(
        user_agent_string=user_agent,
        device=os_device.device,
        os=os_device.os,
        is_mobile=os_device.is_mobile,
        is_tablet=os_device.is_tablet,
        browser=browser.browser,
        engine=browser.engine,
        platform=UNKNOWN if platform is None else platform,
    )


def classify_legacy(user_agent: Optional[str], platform: Optional[str] = None) -> LegacyDeviceInfo:
    """Same classification, flat result shape."""
    return classify(user_agent, platform).to_legacy()


# Results are frozen, safe to hand out to every caller
KNOWN_USER_AGENTS: Dict[Tuple[str, Optional[str]], ClassificationResult] = {}


def classify_cached(user_agent: Optional[str], platform: Optional[str] = None) -> ClassificationResult:
    """
    Classify with caching for repeated user agents.
    """
    key = (user_agent or "", platform)
    if key in KNOWN_USER_AGENTS:
        return KNOWN_USER_AGENTS[key]

    result = classify(user_agent, platform)

    # Cache if we haven't exceeded limit (prevent memory issues)
    if len(KNOWN_USER_AGENTS) < settings.cache_max_entries:
        KNOWN_USER_AGENTS[key] = result

    return result
