"""Build a session and its logging from configuration."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING

from tuneup import config
from tuneup.adapters.result_logger import LoggingResultLogger
from tuneup.domain.title_filter import TitleFilter
from tuneup.logging import configure_logging
from tuneup.service_layer.runner import Runner
from tuneup.service_layer.session import Session

if TYPE_CHECKING:
    from tuneup.interfaces.result_logger import ResultLogger
    from tuneup.interfaces.target import TargetProvider

logger = logging.getLogger(__name__)


def bootstrap(
    target_provider: TargetProvider,
    *,
    results: ResultLogger | None = None,
    only_run: Iterable[str] | None = None,
    environ: Mapping[str, str] | None = None,
) -> Session:
    """Build a session driving *target_provider*.

    Args:
        target_provider: Resolves the device/simulator under test.
        results: Result sink; defaults to `LoggingResultLogger`.
        only_run: Title patterns to run. When omitted they are read from
            ``TUNEUP_ONLY_RUN``.
        environ: Environment mapping used for configuration; defaults to
            `os.environ`.

    Raises:
        InvalidTitlePatternError: If a title pattern is not a valid regex.
    """
    patterns = list(only_run) if only_run is not None else config.get_title_patterns(environ)
    title_filter = TitleFilter.from_patterns(patterns)
    if title_filter.active:
        logger.info("Only running tests matching: %s", ", ".join(patterns or ()))

    runner = Runner(
        target_provider,
        results if results is not None else LoggingResultLogger(),
        title_filter,
    )
    return Session(runner)


def bootstrap_logging(
    *,
    level: int = logging.INFO,
    debug_mode: bool = False,
    color: bool = True,
    force_flush: bool = False,
    environ: Mapping[str, str] | None = None,
) -> list[logging.Handler]:
    """Configure console logging and the flight recorder from the environment."""
    log_path = (
        config.get_log_path(environ) if config.flight_recorder_enabled(environ) else None
    )
    return configure_logging(
        level=level,
        debug_mode=debug_mode,
        color=color,
        log_path=log_path,
        force_flush=force_flush,
    )
