"""
Offline user agent classification.

Turns a user agent string (plus an optional platform hint) into device,
operating system, browser and rendering engine facts using an ordered,
first-match-wins rule chain.
"""

from client_parser.classifier import classify, classify_cached, classify_legacy
from client_parser.schemas import ClassificationResult, LegacyDeviceInfo

__version__ = "1.0.0"

__all__ = [
    "__version__",
    "classify",
    "classify_cached",
    "classify_legacy",
    "ClassificationResult",
    "LegacyDeviceInfo",
]
