"""In-memory target that records diagnostic requests.

Useful as a stand-in device for dry runs of a test script and in tests of
the harness itself. All handles share one `DiagnosticsLog`, so requests made
through freshly resolved targets end up in a single ordered list.
"""

from dataclasses import dataclass, field

from tuneup.interfaces import target

# pylint: disable=too-few-public-methods


@dataclass
class DiagnosticsLog:
    """Ordered record of diagnostic requests.

    Entries are ``("element_tree", None)``, ``("element_tree_json", None)``
    or ``("screen_capture", name)``.
    """

    requests: list[tuple[str, str | None]] = field(default_factory=list)

    @property
    def screenshots(self) -> list[str]:
        """Names of requested screen captures, in order."""
        return [name for kind, name in self.requests if kind == "screen_capture" and name]

    def count(self, kind: str) -> int:
        """Return how many requests of *kind* were made."""
        return sum(1 for k, _ in self.requests if k == kind)


class MemoryWindow(target.Window):
    """Main window of a `MemoryApplication`."""

    def __init__(self, log: DiagnosticsLog) -> None:
        self._log = log

    def log_element_tree_json(self) -> None:
        self._log.requests.append(("element_tree_json", None))


class MemoryApplication(target.Application):
    """Front-most application of a `MemoryTarget`."""

    def __init__(self, log: DiagnosticsLog, name: str = "app") -> None:
        self._log = log
        self.name = name

    def main_window(self) -> MemoryWindow:
        return MemoryWindow(self._log)


class MemoryTarget(target.Target):
    """Target whose diagnostics are appended to a `DiagnosticsLog`."""

    def __init__(self, log: DiagnosticsLog, app_name: str = "app") -> None:
        self._log = log
        self._app_name = app_name

    def front_most_app(self) -> MemoryApplication:
        return MemoryApplication(self._log, self._app_name)

    def log_element_tree(self) -> None:
        self._log.requests.append(("element_tree", None))

    def capture_screen_with_name(self, name: str) -> None:
        self._log.requests.append(("screen_capture", name))


class MemoryTargetProvider(target.TargetProvider):
    """Hands out a new `MemoryTarget` on every call.

    Attributes:
        diagnostics: Shared log of every diagnostic request.
        resolutions: Number of times `local_target` has been called.
    """

    def __init__(self, app_name: str = "app") -> None:
        self.diagnostics = DiagnosticsLog()
        self.resolutions = 0
        self._app_name = app_name

    def local_target(self) -> MemoryTarget:
        self.resolutions += 1
        return MemoryTarget(self.diagnostics, self._app_name)
