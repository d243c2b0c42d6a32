"""Adapters (infrastructure) for TuneUp.

Concrete implementations of the interfaces in `tuneup.interfaces`: result
sinks that write to logging, to the terminal, or to memory, and an in-memory
target that records diagnostic requests.

Dependency rule: may import `tuneup.interfaces` and `tuneup.domain`; the
service layer must not import this package.
"""
