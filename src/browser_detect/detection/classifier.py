"""Browser and operating system classification from User-Agent strings.

Resolves a user agent to:
- Browser family (first match in a priority-ordered predicate table)
- Browser version (family-specific extraction, truncated to ``[0-9.]*``)
- Operating system

This is a pretty printer for browser information, not a feature
detection layer for browser workarounds.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from browser_detect.detection.predicates import (
    is_apple_webkit,
    is_firefox,
    is_gecko,
    is_icab,
    is_ie,
    is_konqueror,
    is_mozilla,
    is_netscape,
    is_omniweb,
    is_opera,
    is_safari,
)

logger = logging.getLogger(__name__)


class BrowserFamily(str, Enum):
    """Resolved browser or engine family. Values are display labels."""

    NETSCAPE = "Netscape"
    FIREFOX = "Firefox"
    MOZILLA = "Mozilla"
    IE = "IE"
    OPERA = "Opera"
    SAFARI = "Safari"
    KONQUEROR = "Konqueror"
    APPLE_WEBKIT = "Apple WebKit"
    GECKO = "Gecko"
    ICAB = "iCab"
    OMNIWEB = "OmniWeb"
    UNKNOWN = ""

    @property
    def label(self) -> str:
        return self.value


class OperatingSystem(str, Enum):
    """Resolved operating system."""

    WINDOWS = "Windows"
    MAC = "Mac"
    UNIX = "Unix"
    LINUX = "Linux"
    UNKNOWN = "Unknown"


@dataclass(frozen=True)
class Classification:
    """Classified browser information for one user agent.

    Attributes:
        family: Resolved browser family.
        version: Version string restricted to digits and dots.
        os: Resolved operating system.
    """

    family: BrowserFamily
    version: str
    os: OperatingSystem

    @property
    def display_name(self) -> str:
        """Pretty string such as ``IE 6.0 on Windows``."""
        return f"{self.family.label} {self.version} on {self.os.value}"

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "family": self.family.label,
            "version": self.version,
            "os": self.os.value,
            "display_name": self.display_name,
        }


def _is_gecko_netscape(ua: str) -> bool:
    return is_gecko(ua) and is_netscape(ua)


# Family priority (order matters, first match wins). The Gecko engine is
# split into Mozilla proper, Gecko based Netscape and plain Gecko before
# any other family is considered. Apple WebKit precedes Safari, so real
# Safari agents report as Apple WebKit. OmniWeb and iCab only select a
# version rule and never name the family.
_FAMILY_TABLE: list[tuple[Callable[[str], bool], BrowserFamily]] = [
    (is_mozilla, BrowserFamily.MOZILLA),
    (_is_gecko_netscape, BrowserFamily.NETSCAPE),
    (is_gecko, BrowserFamily.GECKO),
    (is_apple_webkit, BrowserFamily.APPLE_WEBKIT),
    (is_konqueror, BrowserFamily.KONQUEROR),
    (is_safari, BrowserFamily.SAFARI),
    (is_opera, BrowserFamily.OPERA),
    (is_ie, BrowserFamily.IE),
    (is_firefox, BrowserFamily.FIREFOX),
    (is_netscape, BrowserFamily.NETSCAPE),
]

# OS priority: substrings checked against the lower-cased agent
_OS_TABLE: list[tuple[tuple[str, ...], OperatingSystem]] = [
    (("win",), OperatingSystem.WINDOWS),
    (("mac",), OperatingSystem.MAC),
    (("unix", "sunos", "bsd", "x11"), OperatingSystem.UNIX),
    (("linux",), OperatingSystem.LINUX),
]


_VERSION_CHARS = frozenset("0123456789.")


def _after_first(marker: str, skip: Optional[int] = None) -> Callable[[str], str]:
    """Text after the first ``marker``; ``skip`` overrides the offset."""
    offset = len(marker) if skip is None else skip

    def extract(ua: str) -> str:
        index = ua.find(marker)
        if index == -1:
            return ""
        return ua[index + offset :]

    return extract


def _after_last(marker: str) -> Callable[[str], str]:
    def extract(ua: str) -> str:
        index = ua.rfind(marker)
        if index == -1:
            return ""
        return ua[index + len(marker) :]

    return extract


def _after_gecko_token(ua: str) -> str:
    # "gecko/20050519 netscape/8.0.1" -> "8.0.1"
    gecko = ua.find("gecko/")
    if gecko == -1:
        return ""
    slash = ua.find("/", gecko + 6)
    if slash == -1:
        return ""
    return ua[slash + 1 :]


def _is_gecko_not_mozilla(ua: str) -> bool:
    return is_gecko(ua) and not is_mozilla(ua)


# Version extraction rules, first applicable predicate wins. Opera skips
# a fixed six characters ("opera/" or "opera ") and iCab five.
_VERSION_TABLE: list[tuple[Callable[[str], bool], Callable[[str], str]]] = [
    (_is_gecko_not_mozilla, _after_gecko_token),
    (is_mozilla, _after_first("rv:")),
    (is_ie, _after_first("msie ")),
    (is_konqueror, _after_first("konqueror/")),
    (is_safari, _after_last("safari/")),
    (is_omniweb, _after_last("omniweb/")),
    (is_opera, _after_first("opera", skip=6)),
    (is_icab, _after_first("icab", skip=5)),
]


def to_version(version_plus_cruft: str) -> str:
    """Keep the leading run of digits and dots.

    Args:
        version_plus_cruft: Text that starts with a version number.

    Returns:
        The version prefix, e.g. ``"5.0.375.29"`` for
        ``"5.0.375.29 (KHTML)"``.
    """
    for index, char in enumerate(version_plus_cruft):
        if char not in _VERSION_CHARS:
            return version_plus_cruft[:index]
    return version_plus_cruft


def resolve_family(user_agent: str) -> BrowserFamily:
    ua = user_agent.lower()
    for predicate, family in _FAMILY_TABLE:
        if predicate(ua):
            return family
    return BrowserFamily.UNKNOWN


def resolve_os(user_agent: str) -> OperatingSystem:
    ua = user_agent.lower()
    for needles, os_name in _OS_TABLE:
        if any(needle in ua for needle in needles):
            return os_name
    return OperatingSystem.UNKNOWN


def extract_version(user_agent: str) -> str:
    """Extract the browser version from a user agent.

    Args:
        user_agent: Raw User-Agent header string.

    Returns:
        Version string of digits and dots, or ``""`` when no rule applies.
    """
    ua = user_agent.lower()
    for predicate, extract in _VERSION_TABLE:
        if predicate(ua):
            return to_version(extract(ua))
    return ""


def classify(user_agent: str) -> Classification:
    """Classify a user agent into family, version and operating system.

    Total over all strings: unrecognized agents resolve to
    ``BrowserFamily.UNKNOWN`` with an empty version.

    Args:
        user_agent: Raw User-Agent header string.

    Returns:
        A new Classification.
    """
    ua = user_agent or ""
    result = Classification(
        family=resolve_family(ua),
        version=extract_version(ua),
        os=resolve_os(ua),
    )
    logger.debug(
        "Classified user agent as %r",
        result.display_name,
        extra={"user_agent": ua[:200]},
    )
    return result


def display_string(user_agent: str) -> str:
    """Pretty-printed ``"<family> <version> on <os>"`` for a user agent."""
    return classify(user_agent).display_name
