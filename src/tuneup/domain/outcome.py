"""Outcome of running a test body.

A test body signals failure by raising. `invoke` converts that into a value,
`Passed` or `Failed`, so the runner can decide what to report and which
diagnostics to collect without nesting its own logic inside ``except``.
"""

from __future__ import annotations

import traceback
from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeAlias

# pylint: disable=too-few-public-methods


@dataclass(frozen=True)
class Passed:
    """The body returned normally."""


@dataclass(frozen=True)
class Failed:
    """The body raised.

    Attributes:
        message: One-line description, ``"<ExceptionType>: <text>"``.
        trace: Formatted traceback of the failure.
    """

    message: str
    trace: str

    @classmethod
    def from_exception(cls, exc: BaseException) -> Failed:
        """Build a Failed outcome describing *exc*."""
        return cls(
            message=describe_exception(exc),
            trace="".join(traceback.format_exception(exc)).rstrip(),
        )


Outcome: TypeAlias = Passed | Failed


def describe_exception(exc: BaseException) -> str:
    """Return ``"<ExceptionType>: <text>"``, or just the type name if empty."""
    text = str(exc)
    name = type(exc).__name__
    return f"{name}: {text}" if text else name


def invoke(fn: Callable[..., object], *args: object) -> Outcome:
    """Call ``fn(*args)`` and report how it finished.

    Only `Exception` subclasses are captured; ``KeyboardInterrupt`` and
    ``SystemExit`` still propagate.
    """
    try:
        fn(*args)
    except Exception as exc:  # pylint: disable=broad-except
        return Failed.from_exception(exc)
    return Passed()
