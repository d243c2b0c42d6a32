"""Result logger adapters."""

from .console import ConsoleResultLogger
from .logger import RESULTS_LOGGER_NAME, LoggingResultLogger
from .memory import RecordingResultLogger, ResultEntry, ResultKind

__all__ = [
    "RESULTS_LOGGER_NAME",
    "ConsoleResultLogger",
    "LoggingResultLogger",
    "RecordingResultLogger",
    "ResultEntry",
    "ResultKind",
]
