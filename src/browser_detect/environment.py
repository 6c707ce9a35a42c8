"""Sources for the "current" user agent.

The detection core only ever sees explicit strings. Hosts that want the
ambient user agent (a CGI process, a WSGI request, a CLI) build one of
these sources at the boundary and hand it to :class:`Browser`.
"""

from __future__ import annotations

import os
from typing import Mapping, Optional, Protocol

from browser_detect.config.settings import Settings

DEFAULT_VARIABLE = "HTTP_USER_AGENT"


class UserAgentSource(Protocol):
    """Zero-argument callable returning the current user agent."""

    def __call__(self) -> str: ...


class EnvironUserAgentSource:
    """Read the user agent from a CGI/WSGI style environment mapping.

    Args:
        environ: Mapping to read from. ``None`` reads the process
            environment at call time.
        variable: Key holding the user agent.
        default: Value returned when the key is missing or empty.
    """

    def __init__(
        self,
        environ: Optional[Mapping[str, str]] = None,
        variable: str = DEFAULT_VARIABLE,
        default: str = "",
    ) -> None:
        self._environ = environ
        self.variable = variable
        self.default = default

    def __call__(self) -> str:
        environ = os.environ if self._environ is None else self._environ
        return environ.get(self.variable) or self.default

    def __repr__(self) -> str:
        return f"EnvironUserAgentSource(variable={self.variable!r})"


class StaticUserAgentSource:
    """Always return the same user agent."""

    def __init__(self, user_agent: str) -> None:
        self.user_agent = user_agent

    def __call__(self) -> str:
        return self.user_agent

    def __repr__(self) -> str:
        return f"StaticUserAgentSource({self.user_agent!r})"


def source_from_settings(settings: Settings) -> EnvironUserAgentSource:
    """Build the process environment source described by settings.

    Args:
        settings: Application settings.

    Returns:
        Source reading ``settings.user_agent_variable`` and falling back
        to ``settings.user_agent``.
    """
    return EnvironUserAgentSource(
        variable=settings.user_agent_variable,
        default=settings.user_agent or "",
    )
