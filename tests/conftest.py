"""Global pytest fixtures for VOTER REGISTRY."""

from pathlib import Path

import pytest

# pylint: disable=unused-argument

pytest_plugins = [
    "tests.fixtures.sqlite",
    "tests.fixtures.people",
]

TESTS_ROOT = Path(__file__).parent.resolve()

#: Test suite directory -> marker added by default to the tests it holds.
DEFAULT_MARKERS = {
    TESTS_ROOT / "unit": "unit",
    TESTS_ROOT / "contract": "contract",
    TESTS_ROOT / "integration": "integration",
    TESTS_ROOT / "e2e": "e2e",
}


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Add the suite's default mark to every item that lacks it."""
    for item in items:
        path = item.path.resolve()
        for root, marker_name in DEFAULT_MARKERS.items():
            if root in path.parents and not any(
                marker.name == marker_name for marker in item.iter_markers()
            ):
                item.add_marker(getattr(pytest.mark, marker_name))
