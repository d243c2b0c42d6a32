"""Unit tests.

Purpose
- Verify a single module/class/function in isolation.

Guidelines
- No real device: use the fakes in `tests/unit/service_layer/fakes.py` or the
  in-memory target adapter.
- Assert on the ordered result/diagnostic events, not on internals.
"""
