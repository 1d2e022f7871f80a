"""Global pytest fixtures and default marks for DRILLS."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from drills.adapters.clock import FixedClock

# pylint: disable=unused-argument

TESTS_ROOT = Path(__file__).parent.resolve()
LAYER_MARKERS = {
    TESTS_ROOT / "unit": "unit",
    TESTS_ROOT / "e2e": "e2e",
}


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Mark each item with the layer folder it lives in (`unit` or `e2e`)."""
    for item in items:
        path = item.path.resolve()
        for root, marker_name in LAYER_MARKERS.items():
            if root not in path.parents:
                continue
            if not any(marker.name == marker_name for marker in item.iter_markers()):
                item.add_marker(getattr(pytest.mark, marker_name))


@pytest.fixture
def clock_at() -> Callable[[str], FixedClock]:
    """Factory fixture returning a clock frozen at the given local time.

    Example:
        ```py
        def test_something(clock_at):
            clock = clock_at("2024-07-07 08:00")
        ```
    """
    return FixedClock.at
