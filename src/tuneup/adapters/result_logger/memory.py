"""In-memory result logger that records every event in order."""

from dataclasses import dataclass
from enum import Enum

from tuneup.interfaces.result_logger import ResultLogger


class ResultKind(Enum):
    """Kinds of result event."""

    START = "start"
    PASS = "pass"
    FAIL = "fail"
    ERROR = "error"


@dataclass(frozen=True)
class ResultEntry:
    """A single recorded result event."""

    kind: ResultKind
    text: str


class RecordingResultLogger(ResultLogger):
    """Keep result events in a list, e.g. for tests or for a run summary."""

    def __init__(self) -> None:
        self.entries: list[ResultEntry] = []

    def log_start(self, title: str) -> None:
        self.entries.append(ResultEntry(ResultKind.START, title))

    def log_pass(self, title: str) -> None:
        self.entries.append(ResultEntry(ResultKind.PASS, title))

    def log_fail(self, title: str) -> None:
        self.entries.append(ResultEntry(ResultKind.FAIL, title))

    def log_error(self, message: str) -> None:
        self.entries.append(ResultEntry(ResultKind.ERROR, message))

    def titles(self, kind: ResultKind) -> list[str]:
        """Return the text of every entry of *kind*, in order."""
        return [e.text for e in self.entries if e.kind is kind]

    @property
    def passed(self) -> list[str]:
        """Titles of passed tests, in order."""
        return self.titles(ResultKind.PASS)

    @property
    def failed(self) -> list[str]:
        """Titles of failed tests, in order."""
        return self.titles(ResultKind.FAIL)
