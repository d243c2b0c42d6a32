"""TuneUp test suite.

Folder taxonomy
- unit/         : Isolated checks of the domain, service layer, adapters and config.
- integration/  : Bootstrap wiring and logging handlers touching the real filesystem.
- fixtures/     : Shared pytest fixtures (no tests here).

General guidance
- Unit tests drive the harness through fakes of the target and result logger.
- Property-based tests use hypothesis and @pytest.mark.property.
- Markers: unit, integration, property
"""
