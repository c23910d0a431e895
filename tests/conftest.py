"""Global pytest fixtures and default marks for the bookstore test suite."""

from pathlib import Path

import pytest

# pylint: disable=unused-argument

TESTS_ROOT = Path(__file__).parent.resolve()
DEFAULT_MARKS = {TESTS_ROOT / "unit": "unit", TESTS_ROOT / "e2e": "e2e"}

pytest_plugins = [
    "tests.fixtures.datagen",
]


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Mark items under `tests/unit/` as `unit` and under `tests/e2e/` as `e2e`."""
    for item in items:
        parents = item.path.resolve().parents
        for root, marker_name in DEFAULT_MARKS.items():
            if root in parents and not any(
                marker.name == marker_name for marker in item.iter_markers()
            ):
                item.add_marker(getattr(pytest.mark, marker_name))
