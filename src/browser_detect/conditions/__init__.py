"""Browser condition expressions ("ie lt 7", "not opera", "safari !3")."""

from browser_detect.conditions.evaluator import (
    compare_versions,
    evaluate,
    evaluate_condition,
    family_matches,
)
from browser_detect.conditions.parser import (
    Comparator,
    Condition,
    InvalidCondition,
    parse_condition,
)

__all__ = [
    "Comparator",
    "Condition",
    "InvalidCondition",
    "parse_condition",
    "compare_versions",
    "evaluate",
    "evaluate_condition",
    "family_matches",
]
