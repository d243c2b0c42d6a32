"""Per-test options controlling which failure diagnostics are collected.

`OptionSet` is a plain mutable record with documented defaults. Every test
that does not bring its own options gets a *fresh* instance, so a caller who
tweaks the object returned by `create_default_options` never affects any
other test.

Partial overrides are merged field by field with `OptionSet.merged`. Keys may
use either the Python field names (``log_tree``) or the camelCase spelling
used by UIAutomation scripts (``logTree``).
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields, replace

from .errors import InvalidOptionValueError, UnknownOptionError

# camelCase aliases accepted in override mappings
OPTION_ALIASES = {
    "logStackTrace": "log_stack_trace",
    "logTree": "log_tree",
    "logTreeJSON": "log_tree_json",
    "screenCapture": "screen_capture",
}


@dataclass
class OptionSet:
    """Diagnostics to collect when a test body fails.

    Attributes:
        log_stack_trace: Log the failure's stack trace as a second error entry.
        log_tree: Ask the target to dump its element tree.
        log_tree_json: Ask the application's main window for a structured
            (JSON) element tree dump.
        screen_capture: Capture the screen as ``"<title>-fail"``.
    """

    log_stack_trace: bool = False
    log_tree: bool = True
    log_tree_json: bool = False
    screen_capture: bool = True

    def merged(self, overrides: Mapping[str, bool]) -> OptionSet:
        """Return a copy with the fields named in *overrides* replaced.

        Args:
            overrides: Partial mapping of option name to value.

        Returns:
            A new OptionSet; ``self`` is left untouched.

        Raises:
            UnknownOptionError: If a key does not name an option.
            InvalidOptionValueError: If a value is not a bool.
        """
        known = {f.name for f in fields(self)}
        changes: dict[str, bool] = {}
        for key, value in overrides.items():
            name = OPTION_ALIASES.get(key, key)
            if name not in known:
                raise UnknownOptionError(key)
            if not isinstance(value, bool):
                raise InvalidOptionValueError(key, value)
            changes[name] = value
        return replace(self, **changes)

    @classmethod
    def coerce(cls, value: OptionSet | Mapping[str, bool] | None) -> OptionSet | None:
        """Normalize caller-supplied options.

        ``None`` stays ``None`` (defaults are applied at run time), an
        OptionSet is returned as is, and a mapping is merged over the defaults.
        """
        if value is None or isinstance(value, OptionSet):
            return value
        return cls().merged(value)


def create_default_options() -> OptionSet:
    """Return a new OptionSet holding the current defaults.

    Callers can change only the options they care about and still pick up
    defaults for any option added later.
    """
    return OptionSet()
