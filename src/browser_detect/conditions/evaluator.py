"""Evaluation of parsed browser conditions against a classification.

Version comparison is lexicographic on strings, so ``"9" > "10"``.
Callers that need numeric ordering must compare versions themselves.
"""

from __future__ import annotations

import logging

from browser_detect.conditions.parser import Condition, parse_condition
from browser_detect.detection.classifier import Classification, classify

logger = logging.getLogger(__name__)


def compare_versions(left: str, right: str) -> int:
    """Three-way string comparison.

    Returns:
        -1, 0 or 1 as ``left`` sorts before, equal to or after ``right``.
    """
    return (left > right) - (left < right)


def family_matches(family: str, classification: Classification) -> bool:
    """Check a family token as a prefix of the classified browser.

    The token is tried against the display string (``"ie 6.0 on
    windows"``) and against the family label with spaces removed, so
    ``applewebkit`` matches ``Apple WebKit``.
    """
    token = family.lower()
    if classification.display_name.lower().startswith(token):
        return True
    compact = classification.family.label.replace(" ", "").lower()
    return compact.startswith(token)


def evaluate_condition(condition: Condition, classification: Classification) -> bool:
    """Evaluate a parsed condition.

    Evaluation order:
    1. Family-only condition: family match, inverted when negated
    2. Family mismatch without negation is false
    3. ``!version`` shorthand: version string inequality
    4. Comparator: three-way comparison, operands swapped when negated

    Args:
        condition: Parsed condition.
        classification: Classification of the user agent under test.

    Returns:
        True if the condition holds. Unrecognized operators evaluate to
        False.
    """
    match = family_matches(condition.family, classification)

    if not condition.has_version_test:
        return match != condition.negate

    if not (match or condition.negate):
        return False

    actual = classification.version
    expected = condition.version or ""

    if condition.exclude_version:
        return actual != expected

    if condition.negate:
        delta = compare_versions(expected, actual)
    else:
        delta = compare_versions(actual, expected)

    comparator = condition.comparator
    if comparator is None:
        logger.debug(
            "Unrecognized comparator %r",
            condition.operator,
            extra={"condition": condition.expression},
        )
        return False
    return comparator.test(delta)


def evaluate(user_agent: str, condition: str) -> bool:
    """Evaluate a condition string against a user agent.

    Args:
        user_agent: Raw User-Agent header string.
        condition: Expression such as ``"ie lt 7"`` or ``"not opera"``.

    Returns:
        True if the user agent satisfies the condition.

    Raises:
        InvalidCondition: The condition is malformed.
    """
    parsed = parse_condition(condition)
    return evaluate_condition(parsed, classify(user_agent))
