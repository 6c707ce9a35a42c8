"""Parser for browser condition expressions.

Grammar (whitespace separated, case-insensitive)::

    condition  := ["not"] family [comparator version]
                | "!"family [comparator version]
                | family "!"version
    comparator := lt | < | lte | <= | gt | > | gte | >= | eq | =

The family token is a prefix of the family display label, so ``fire``
matches Firefox and ``ie`` matches IE.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

logger = logging.getLogger(__name__)

NOT = "not"


class InvalidCondition(ValueError):
    """Raised when a condition string is syntactically malformed."""

    def __init__(self, message: str, condition: str = ""):
        super().__init__(message)
        self.condition = condition


class Comparator(str, Enum):
    """Version comparison operators."""

    LT = "lt"
    LTE = "lte"
    GT = "gt"
    GTE = "gte"
    EQ = "eq"

    @classmethod
    def from_token(cls, token: str) -> Optional["Comparator"]:
        """Resolve a word or symbol operator, ``None`` if unrecognized."""
        return _COMPARATOR_TOKENS.get(token)

    def test(self, delta: int) -> bool:
        """Apply the operator to a three-way comparison result."""
        if self is Comparator.LT:
            return delta < 0
        elif self is Comparator.LTE:
            return delta <= 0
        elif self is Comparator.GT:
            return delta > 0
        elif self is Comparator.GTE:
            return delta >= 0
        return delta == 0


_COMPARATOR_TOKENS: dict[str, Comparator] = {
    "lt": Comparator.LT,
    "<": Comparator.LT,
    "lte": Comparator.LTE,
    "<=": Comparator.LTE,
    "gt": Comparator.GT,
    ">": Comparator.GT,
    "gte": Comparator.GTE,
    ">=": Comparator.GTE,
    "eq": Comparator.EQ,
    "=": Comparator.EQ,
}


@dataclass(frozen=True)
class Condition:
    """A parsed browser condition.

    Attributes:
        negate: Leading ``not`` or ``!`` was present.
        family: Family name prefix, lower-cased.
        operator: Raw comparator token, kept even when unrecognized.
        version: Version operand, if any.
        exclude_version: ``family !version`` shorthand (version inequality).
    """

    negate: bool
    family: str
    operator: Optional[str] = None
    version: Optional[str] = None
    exclude_version: bool = False

    @property
    def has_version_test(self) -> bool:
        return self.exclude_version or self.operator is not None

    @property
    def comparator(self) -> Optional[Comparator]:
        if self.operator is None:
            return None
        return Comparator.from_token(self.operator)

    @property
    def expression(self) -> str:
        """Canonical lower-cased text, e.g. ``"not ie lt 7"``."""
        parts = ["not"] if self.negate else []
        parts.append(self.family)
        if self.exclude_version:
            parts.append(f"!{self.version}")
        elif self.operator is not None:
            parts.extend([self.operator, self.version or ""])
        return " ".join(parts)


def _tokenize(condition: str) -> list[str]:
    # Split on single spaces; trailing empty tokens are dropped
    tokens = condition.lower().split(" ")
    while tokens and not tokens[-1]:
        tokens.pop()
    return tokens


def parse_condition(condition: str) -> Condition:
    """Parse a condition string.

    Args:
        condition: Expression such as ``"ie lt 7"``, ``"not opera"`` or
            ``"safari !3"``.

    Returns:
        The parsed Condition.

    Raises:
        InvalidCondition: Empty condition, ``not`` without a family, or a
            two-token form whose second token is not ``!version``.
    """
    tokens = _tokenize(condition)
    if not tokens:
        raise InvalidCondition("Empty condition", condition)

    negate = False
    if tokens[0] == NOT:
        tokens = tokens[1:]
        negate = True
        if not tokens:
            raise InvalidCondition("Missing browser after 'not'", condition)
    elif tokens[0].startswith("!"):
        tokens[0] = tokens[0][1:]
        negate = True

    family = tokens[0]

    if len(tokens) == 1:
        parsed = Condition(negate=negate, family=family)
    elif len(tokens) == 2:
        if not tokens[1].startswith("!"):
            raise InvalidCondition(
                f"Illegal syntax: expected '!<version>' after {family!r}",
                condition,
            )
        parsed = Condition(
            negate=negate,
            family=family,
            version=tokens[1][1:],
            exclude_version=True,
        )
    else:
        if len(tokens) > 3:
            logger.debug(
                "Ignoring trailing tokens in condition %r",
                condition,
                extra={"condition": condition},
            )
        parsed = Condition(
            negate=negate,
            family=family,
            operator=tokens[1],
            version=tokens[2],
        )

    logger.debug(
        "Parsed condition %r as %s", condition, parsed, extra={"condition": condition}
    )
    return parsed
