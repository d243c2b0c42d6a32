"""Service layer for TuneUp.

Orchestrates test execution: the registry queues test cases, the runner
executes bodies inside the protective envelope, and the session exposes the
`setup` / `test` / `tear_down` entry points used by test scripts.

Dependency rule: may import `tuneup.domain` and `tuneup.interfaces`; must not
import `tuneup.adapters` or `tuneup.bootstrap`.
"""

from .registry import Registry
from .runner import Runner
from .session import Session

__all__ = ["Registry", "Runner", "Session"]
