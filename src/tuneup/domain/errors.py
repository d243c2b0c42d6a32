"""Domain-layer error definitions."""

# ============================================================================
#                           General harness errors
# ============================================================================


class TuneUpError(Exception):
    """Base class for harness errors."""


# ============================================================================
#                           Configuration errors
# ============================================================================


class InvalidTitlePatternError(TuneUpError, ValueError):
    """Raised when a title filter pattern is not a valid regular expression."""

    def __init__(self, pattern: str, reason: str) -> None:
        super().__init__(f"Invalid title pattern {pattern!r}: {reason}")
        self.pattern = pattern
        self.reason = reason


class UnknownOptionError(TuneUpError, KeyError):
    """Raised when an option override names a field that does not exist."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unknown test option {self.name!r}"


class InvalidOptionValueError(TuneUpError, TypeError):
    """Raised when an option override is not a bool (e.g. the string "false")."""

    def __init__(self, name: str, value: object) -> None:
        super().__init__(
            f"Test option {name!r} must be a bool, got {type(value).__name__} {value!r}"
        )
        self.name = name
        self.value = value
