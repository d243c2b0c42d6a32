"""Domain model for TuneUp.

Plain value types shared by the service layer: test cases, per-test options,
outcomes of running a test body, and the title filter. Nothing here touches
a device, a logger sink, or process-wide state.

Dependency rule: this package must not import `tuneup.service_layer`,
`tuneup.adapters`, or `tuneup.bootstrap`.
"""

from .options import OptionSet, create_default_options
from .outcome import Failed, Outcome, Passed, invoke
from .test_case import TestCase
from .title_filter import TitleFilter

__all__ = [
    "Failed",
    "OptionSet",
    "Outcome",
    "Passed",
    "TestCase",
    "TitleFilter",
    "create_default_options",
    "invoke",
]
