"""Browser, version and operating system detection.

Provides:
- A bank of overlapping ``is_*`` predicates over raw user agents
- Priority-ordered family, OS and version resolution
- Pretty-printed display strings
"""

from browser_detect.detection.classifier import (
    BrowserFamily,
    Classification,
    OperatingSystem,
    classify,
    display_string,
    extract_version,
    resolve_family,
    resolve_os,
    to_version,
)
from browser_detect.detection.predicates import (
    PREDICATES,
    evaluate_predicates,
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

__all__ = [
    "BrowserFamily",
    "Classification",
    "OperatingSystem",
    "classify",
    "display_string",
    "extract_version",
    "resolve_family",
    "resolve_os",
    "to_version",
    "PREDICATES",
    "evaluate_predicates",
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
]
