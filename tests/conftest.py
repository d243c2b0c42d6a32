"""Global pytest fixtures and default marks for TuneUp."""

from pathlib import Path

import pytest

# pylint: disable=unused-argument

pytest_plugins = [
    "tests.fixtures.root_logger",
]

TESTS_ROOT = Path(__file__).parent.resolve()
DEFAULT_MARKS = {"unit": TESTS_ROOT / "unit", "integration": TESTS_ROOT / "integration"}


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Mark items with the name of the top-level folder they live in."""
    for item in items:
        path = item.path.resolve()
        for name, root in DEFAULT_MARKS.items():
            if root in path.parents and not any(
                marker.name == name for marker in item.iter_markers()
            ):
                item.add_marker(getattr(pytest.mark, name))
