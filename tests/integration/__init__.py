"""Integration tests.

Purpose
- Exercise bootstrap wiring end to end: configuration, in-memory target,
  result loggers, and the Rich console / flight-recorder handlers.

Guidelines
- Restore the root logger after reconfiguring it (`restore_root_logger`).
- Write log files under `tmp_path` only.
"""
