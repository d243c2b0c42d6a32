"""Result logger backed by the standard `logging` module.

Results go to the ``tuneup.results`` logger, so whatever handlers are
attached by `tuneup.logging.configure_logging` (console, flight recorder)
pick them up. Starts and passes are INFO; errors and failures are ERROR so
the flight recorder flushes on the first failing test.
"""

import logging

from tuneup.interfaces.result_logger import ResultLogger

RESULTS_LOGGER_NAME = "tuneup.results"


class LoggingResultLogger(ResultLogger):
    """Write test results as log records."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger(RESULTS_LOGGER_NAME)

    @property
    def logger(self) -> logging.Logger:
        """Return the logger results are written to."""
        return self._logger

    def log_start(self, title: str) -> None:
        self._logger.info("Start: %s", title)

    def log_pass(self, title: str) -> None:
        self._logger.info("Pass: %s", title)

    def log_fail(self, title: str) -> None:
        self._logger.error("Fail: %s", title)

    def log_error(self, message: str) -> None:
        self._logger.error("%s", message)
