"""Interfaces (application boundary) for TuneUp.

Defines the contracts of the collaborators the harness drives but does not
implement: the device/simulator target, the front-most application and its
main window, and the sink that records test results.

Dependency rule: this package is independent; do not import from any other
`tuneup.*` modules.
"""
