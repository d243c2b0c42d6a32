"""Bootstrap (composition root) for TuneUp.

Assembles a test session at runtime: reads configuration, compiles the title
filter, picks a result logger, and wires them with the caller's target
provider into a `Session`.

Import rules:
- Test scripts import *this* package (not adapters/service_layer directly).
- This package may import: `tuneup.adapters`, `tuneup.service_layer`,
  `tuneup.interfaces`, `tuneup.domain`, `tuneup.config` and `tuneup.logging`.
- Inner layers must not import `tuneup.bootstrap`.
"""

from .bootstrap import bootstrap, bootstrap_logging

__all__ = ["bootstrap", "bootstrap_logging"]
