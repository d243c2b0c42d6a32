"""Fakes for service-layer tests.

`EventLog` is a single ordered list shared by a fake result logger and a fake
target, so tests can assert on the interleaving of result events and
diagnostic requests.
"""

from __future__ import annotations

from tuneup.interfaces.result_logger import ResultLogger
from tuneup.interfaces.target import Application, Target, TargetProvider, Window

# pylint: disable=too-few-public-methods


class EventLog(list):
    """Ordered ``(kind, value)`` events."""

    def kinds(self) -> list[str]:
        """Return just the event kinds."""
        return [kind for kind, _ in self]

    def for_title(self, title: str) -> list[tuple[str, str | None]]:
        """Return start/pass/fail events whose value is *title*."""
        return [(k, v) for k, v in self if k in {"start", "pass", "fail"} and v == title]


class FakeResultLogger(ResultLogger):
    """Result logger writing into an EventLog."""

    def __init__(self, events: EventLog) -> None:
        self.events = events

    def log_start(self, title: str) -> None:
        self.events.append(("start", title))

    def log_pass(self, title: str) -> None:
        self.events.append(("pass", title))

    def log_fail(self, title: str) -> None:
        self.events.append(("fail", title))

    def log_error(self, message: str) -> None:
        self.events.append(("error", message))


class FakeWindow(Window):
    """Window writing into an EventLog."""

    def __init__(self, events: EventLog) -> None:
        self.events = events

    def log_element_tree_json(self) -> None:
        self.events.append(("tree_json", None))


class FakeApplication(Application):
    """Application writing into an EventLog."""

    def __init__(self, events: EventLog) -> None:
        self.events = events

    def main_window(self) -> FakeWindow:
        return FakeWindow(self.events)


class FakeTarget(Target):
    """Target writing into an EventLog; `serial` identifies the resolution."""

    def __init__(self, events: EventLog, serial: int) -> None:
        self.events = events
        self.serial = serial

    def front_most_app(self) -> FakeApplication:
        return FakeApplication(self.events)

    def log_element_tree(self) -> None:
        self.events.append(("tree", None))

    def capture_screen_with_name(self, name: str) -> None:
        self.events.append(("screen", name))


class FakeTargetProvider(TargetProvider):
    """Hands out a new FakeTarget per call, optionally failing instead."""

    def __init__(self, events: EventLog, fail_with: Exception | None = None) -> None:
        self.events = events
        self.fail_with = fail_with
        self.resolved: list[FakeTarget] = []

    def local_target(self) -> FakeTarget:
        if self.fail_with is not None:
            raise self.fail_with
        target = FakeTarget(self.events, serial=len(self.resolved))
        self.resolved.append(target)
        return target
