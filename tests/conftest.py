"""Global pytest configuration for utilkit.

Tests are marked by the folder they live in (``unit``, ``integration``,
``e2e``) unless they already carry that mark.
"""

from pathlib import Path

import pytest

# pylint: disable=unused-argument

TESTS_ROOT = Path(__file__).parent.resolve()
FOLDER_MARKERS = {
    TESTS_ROOT / "unit": "unit",
    TESTS_ROOT / "integration": "integration",
    TESTS_ROOT / "e2e": "e2e",
}


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Add the folder's default mark to every collected item."""
    for item in items:
        path = item.path.resolve()
        for folder, marker_name in FOLDER_MARKERS.items():
            if folder in path.parents and not any(
                marker.name == marker_name for marker in item.iter_markers()
            ):
                item.add_marker(getattr(pytest.mark, marker_name))
