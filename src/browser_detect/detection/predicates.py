"""Substring predicates over raw User-Agent strings.

Each predicate lower-cases its input and answers a single yes/no
question about the signature. Predicates overlap on purpose (a Safari
user agent also mentions Mozilla and AppleWebKit); the classifier
resolves the overlap by priority.
"""

from __future__ import annotations

from typing import Callable


def is_ie(user_agent: str) -> bool:
    """Genuine Internet Explorer (not Opera or WebTV claiming MSIE)."""
    ua = user_agent.lower()
    return "msie" in ua and not is_opera(ua) and "webtv" not in ua


def is_gecko(user_agent: str) -> bool:
    """Gecko engine. Safari says "like Gecko" and is excluded."""
    ua = user_agent.lower()
    return "gecko" in ua and "safari" not in ua


def is_firefox(user_agent: str) -> bool:
    ua = user_agent.lower()
    return "firefox/" in ua or "firebird/" in ua


def is_mozilla(user_agent: str) -> bool:
    """Mozilla proper: the Gecko build date is the last token.

    ``gecko/`` must be followed by exactly eight characters and then the
    end of the string. Gecko based Netscape carries trailing tokens after
    the build date and fails this test.
    """
    ua = user_agent.lower()
    if not is_gecko(ua):
        return False
    index = ua.find("gecko/")
    return index != -1 and index + 14 == len(ua)


def is_opera(user_agent: str) -> bool:
    return "opera" in user_agent.lower()


def is_safari(user_agent: str) -> bool:
    return "safari" in user_agent.lower()


def is_apple_webkit(user_agent: str) -> bool:
    return "applewebkit" in user_agent.lower()


def is_konqueror(user_agent: str) -> bool:
    return "konqueror" in user_agent.lower()


def is_netscape(user_agent: str) -> bool:
    """Netscape, either Gecko based or a classic Mozilla/4 style agent."""
    ua = user_agent.lower()
    if is_gecko(ua):
        return "netscape" in ua
    return (
        "mozilla" in ua
        and not (is_opera(ua) or is_safari(ua))
        and "spoofer" not in ua
        and "compatible" not in ua
        and "webtv" not in ua
        and "hotjava" not in ua
    )


def is_icab(user_agent: str) -> bool:
    return "icab" in user_agent.lower()


def is_omniweb(user_agent: str) -> bool:
    return "omniweb" in user_agent.lower()


def is_ie_compatible(user_agent: str) -> bool:
    """Claims MSIE without being genuine Internet Explorer."""
    return "msie" in user_agent.lower() and not is_ie(user_agent)


def is_ns_compatible(user_agent: str) -> bool:
    """Claims Mozilla without being Netscape or Mozilla proper."""
    return "mozilla" in user_agent.lower() and not (
        is_netscape(user_agent) or is_mozilla(user_agent)
    )


# Report order for flag listings
PREDICATES: dict[str, Callable[[str], bool]] = {
    "ie": is_ie,
    "gecko": is_gecko,
    "firefox": is_firefox,
    "mozilla": is_mozilla,
    "opera": is_opera,
    "safari": is_safari,
    "apple_webkit": is_apple_webkit,
    "konqueror": is_konqueror,
    "netscape": is_netscape,
    "icab": is_icab,
    "omniweb": is_omniweb,
    "ie_compatible": is_ie_compatible,
    "ns_compatible": is_ns_compatible,
}


def evaluate_predicates(user_agent: str) -> dict[str, bool]:
    """Run every predicate against a user agent.

    Args:
        user_agent: Raw User-Agent header string.

    Returns:
        Mapping of predicate name to result, in ``PREDICATES`` order.
    """
    return {name: predicate(user_agent) for name, predicate in PREDICATES.items()}
