"""Configuration utilities for TuneUp.

Settings come from the environment so a test script can stay unchanged
between a full run and a focused one:

- ``TUNEUP_ONLY_RUN``: title patterns to run, one per line, or a JSON array
  of strings.
- ``TUNEUP_LOG_PATH``: flight-recorder file.
- ``TUNEUP_FLIGHT_RECORDER``: set to ``0``/``false``/``no``/``off`` to disable it.
"""

import json
import os
from collections.abc import Mapping
from pathlib import Path

from platformdirs import user_log_dir

ONLY_RUN_ENV = "TUNEUP_ONLY_RUN"  # pragma: no mutate
LOG_PATH_ENV = "TUNEUP_LOG_PATH"  # pragma: no mutate
FLIGHT_RECORDER_ENV = "TUNEUP_FLIGHT_RECORDER"  # pragma: no mutate

FALSY_VALUES = {"0", "false", "no", "off"}


def _parse_json_patterns(raw: str) -> list[str] | None:
    """Return the patterns of a JSON array of strings, or None otherwise.

    Single regexes such as ``[A-Z].*`` or ``[1]`` also start with a bracket;
    they are read as line patterns instead.
    """
    try:
        value = json.loads(raw)
    except json.JSONDecodeError:
        return None
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        return None
    return value


def get_title_patterns(environ: Mapping[str, str] | None = None) -> list[str] | None:
    """Get the title patterns from ``TUNEUP_ONLY_RUN``.

    A value that decodes as a JSON array of strings is taken as the pattern
    list verbatim. Anything else holds one pattern per line; surrounding
    whitespace is trimmed and blank lines are ignored. Spaces and commas
    inside a pattern are part of it (``Sign In``, ``a{1,3}``).

    Args:
        environ: Environment mapping; defaults to `os.environ`.

    Returns:
        The patterns in order, or ``None`` when the variable is unset or blank
        (no filtering).
    """
    environ = os.environ if environ is None else environ
    if not (raw := environ.get(ONLY_RUN_ENV, "").strip()):
        return None
    if raw.startswith("[") and (patterns := _parse_json_patterns(raw)) is not None:
        return patterns
    return [line.strip() for line in raw.splitlines() if line.strip()]


def default_log_path() -> Path:
    """Return the per-user default flight-recorder path."""
    return Path(user_log_dir("tuneup", appauthor=False)) / "latest.log"


def get_log_path(environ: Mapping[str, str] | None = None) -> Path:
    """Get the flight-recorder path from ``TUNEUP_LOG_PATH`` or the default."""
    environ = os.environ if environ is None else environ
    if raw := environ.get(LOG_PATH_ENV):
        return Path(raw)
    return default_log_path()


def flight_recorder_enabled(environ: Mapping[str, str] | None = None) -> bool:
    """Return False if ``TUNEUP_FLIGHT_RECORDER`` is set to a falsy value."""
    environ = os.environ if environ is None else environ
    return environ.get(FLIGHT_RECORDER_ENV, "1").strip().lower() not in FALSY_VALUES
