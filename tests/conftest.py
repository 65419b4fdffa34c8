"""Global pytest configuration for TIDBITS.

- Tests under `tests/unit/` and `tests/e2e/` are marked `unit` / `e2e`
  automatically (unless they already carry that mark), so `-m unit` selects
  the fast suite.
- TIDBITS_* environment variables from the developer's shell never leak into
  a test.
"""

from __future__ import annotations

from pathlib import Path

import pytest

# pylint: disable=unused-argument

TESTS_ROOT = Path(__file__).parent.resolve()
DEFAULT_MARKS = {
    TESTS_ROOT / "unit": "unit",
    TESTS_ROOT / "e2e": "e2e",
}

TIDBITS_ENV_VARS = (
    "TIDBITS_CURRENCY_PRESET",
    "TIDBITS_LOG_PATH",
    "TIDBITS_FLIGHT_RECORDER",
    "TIDBITS_FLIGHT_RECORDER_CAPACITY",
    "TIDBITS_FORCE_FLUSH",
    "TIDBITS_LOGGER_LEVELS",
)


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Add the default mark of the directory each test lives in."""
    for item in items:
        parents = item.path.resolve().parents
        for root, marker_name in DEFAULT_MARKS.items():
            if root in parents and not any(
                marker.name == marker_name for marker in item.iter_markers()
            ):
                item.add_marker(getattr(pytest.mark, marker_name))


@pytest.fixture(autouse=True)
def _isolate_tidbits_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's TIDBITS_* settings out of every test."""
    for name in TIDBITS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
