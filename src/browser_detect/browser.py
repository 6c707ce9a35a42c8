"""Browser facade bound to a user agent source.

Gives the zero-argument forms of the detection and condition API: the
user agent comes from the injected source on every call.
"""

from __future__ import annotations

from typing import Mapping

from browser_detect.conditions.evaluator import evaluate
from browser_detect.detection.classifier import (
    Classification,
    classify,
    extract_version,
)
from browser_detect.detection.predicates import evaluate_predicates
from browser_detect.environment import (
    DEFAULT_VARIABLE,
    EnvironUserAgentSource,
    StaticUserAgentSource,
    UserAgentSource,
)


class Browser:
    """The browser behind a user agent source.

    Example:
        >>> browser = Browser.for_user_agent(
        ...     "Mozilla/4.0 (compatible; MSIE 6.0; Windows NT 5.1)"
        ... )
        >>> browser.display_string()
        'IE 6.0 on Windows'
        >>> browser.matches("ie lt 7")
        True
    """

    def __init__(self, source: UserAgentSource) -> None:
        self._source = source

    @classmethod
    def for_user_agent(cls, user_agent: str) -> "Browser":
        return cls(StaticUserAgentSource(user_agent))

    @classmethod
    def from_environ(
        cls, environ: Mapping[str, str], variable: str = DEFAULT_VARIABLE
    ) -> "Browser":
        """Bind to a WSGI environ or CGI style mapping."""
        return cls(EnvironUserAgentSource(environ, variable=variable))

    @property
    def user_agent(self) -> str:
        return self._source()

    def classify(self) -> Classification:
        return classify(self.user_agent)

    def display_string(self) -> str:
        return self.classify().display_name

    def version(self) -> str:
        return extract_version(self.user_agent)

    def matches(self, condition: str) -> bool:
        """Evaluate a condition such as ``"not opera"``.

        Raises:
            InvalidCondition: The condition is malformed.
        """
        return evaluate(self.user_agent, condition)

    def flags(self) -> dict[str, bool]:
        """Every ``is_*`` predicate result for the current user agent."""
        return evaluate_predicates(self.user_agent)

    def __repr__(self) -> str:
        return f"Browser({self._source!r})"
