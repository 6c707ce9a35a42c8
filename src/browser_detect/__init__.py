"""browser-detect - Pretty-printed browser information and browser conditions."""

__version__ = "1.0.0"

from .browser import Browser
from .conditions import (
    Comparator,
    Condition,
    InvalidCondition,
    compare_versions,
    evaluate,
    evaluate_condition,
    parse_condition,
)
from .detection import (
    BrowserFamily,
    Classification,
    OperatingSystem,
    classify,
    display_string,
    extract_version,
    is_apple_webkit,
    is_firefox,
    is_gecko,
    is_icab,
    is_ie,
    is_ie_compatible,
    is_konqueror,
    is_mozilla,
    is_netscape,
    is_ns_compatible,
    is_omniweb,
    is_opera,
    is_safari,
)
from .environment import (
    EnvironUserAgentSource,
    StaticUserAgentSource,
    UserAgentSource,
)

__all__ = [
    "Browser",
    # Detection
    "BrowserFamily",
    "Classification",
    "OperatingSystem",
    "classify",
    "display_string",
    "extract_version",
    "is_apple_webkit",
    "is_firefox",
    "is_gecko",
    "is_icab",
    "is_ie",
    "is_ie_compatible",
    "is_konqueror",
    "is_mozilla",
    "is_netscape",
    "is_ns_compatible",
    "is_omniweb",
    "is_opera",
    "is_safari",
    # Conditions
    "Comparator",
    "Condition",
    "InvalidCondition",
    "compare_versions",
    "evaluate",
    "evaluate_condition",
    "parse_condition",
    # Environment
    "EnvironUserAgentSource",
    "StaticUserAgentSource",
    "UserAgentSource",
]
