"""TuneUp

A small registration and execution harness for UI automation tests.
Test scripts register named cases against a session, and the session runs
them in order, reporting start/pass/fail through a result logger and
requesting failure diagnostics (element trees, screenshots, stack traces)
from the device under test.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
