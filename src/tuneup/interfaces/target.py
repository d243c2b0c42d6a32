"""Interfaces for the automation target under test.

The harness never inspects or drives the UI itself. It resolves a `Target`
from a `TargetProvider` before each test body and cleanup, hands the target
and its front-most `Application` to the body, and on failure asks them for
diagnostics.
"""

import abc

# pylint: disable=too-few-public-methods


class Window(abc.ABC):
    """A top-level application window."""

    @abc.abstractmethod
    def log_element_tree_json(self) -> None:
        """Log the window's element hierarchy as structured JSON."""


class Application(abc.ABC):
    """The front-most running application."""

    @abc.abstractmethod
    def main_window(self) -> Window:
        """Return the application's main window."""


class Target(abc.ABC):
    """The device or simulator the tests run against."""

    @abc.abstractmethod
    def front_most_app(self) -> Application:
        """Return the application currently in front."""

    @abc.abstractmethod
    def log_element_tree(self) -> None:
        """Log the current element hierarchy."""

    @abc.abstractmethod
    def capture_screen_with_name(self, name: str) -> None:
        """Capture a screenshot stored under *name*."""


class TargetProvider(abc.ABC):
    """Resolves the local target.

    Called once per test body and once per cleanup; implementations must not
    assume the returned handle is reused, since device state may change
    between tests.
    """

    @abc.abstractmethod
    def local_target(self) -> Target:
        """Return a handle on the local target."""
