"""Allow-list of title patterns restricting which tests run.

Each pattern is a regular expression that must match the *whole* title. A
title runs when any pattern matches. With no patterns configured (``None``
or an empty list) every title runs.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

from .errors import InvalidTitlePatternError


@dataclass(frozen=True)
class TitleFilter:
    """Compiled title patterns; an empty filter allows everything."""

    patterns: tuple[re.Pattern[str], ...] = ()

    @classmethod
    def from_patterns(cls, patterns: Iterable[str] | None) -> TitleFilter:
        """Compile *patterns* into a filter.

        Raises:
            InvalidTitlePatternError: If a pattern is not a valid regex.
        """
        if patterns is None:
            return cls()
        compiled = []
        for pattern in patterns:
            try:
                compiled.append(re.compile(pattern))
            except re.error as e:
                raise InvalidTitlePatternError(pattern, str(e)) from e
        return cls(tuple(compiled))

    @property
    def active(self) -> bool:
        """True when at least one pattern is configured."""
        return bool(self.patterns)

    def allows(self, title: str) -> bool:
        """Return True if *title* should run."""
        if not self.patterns:
            return True
        return any(p.fullmatch(title) for p in self.patterns)
