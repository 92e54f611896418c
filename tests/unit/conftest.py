"""Default marks and environment isolation for tests under `tests/unit/`."""

from pathlib import Path

import pytest

from helperkit import config

# pylint: disable=unused-argument

UNIT_ROOT = Path(__file__).parent.resolve()
MARKER_NAME = "unit"
HELPERKIT_ENV_VARS = (
    config.TIMEZONE_ENV,
    config.DOCUMENT_ROOT_ENV,
    config.LOG_PATH_ENV,
    config.LOGGER_LEVELS_ENV,
)


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]  # pylint: disable=redefined-outer-name
) -> None:
    """Add default `unit` marks to items in `tests/unit/`."""
    for item in items:
        if UNIT_ROOT in item.path.resolve().parents:
            if not any(marker.name == MARKER_NAME for marker in item.iter_markers()):
                item.add_marker(pytest.mark.unit)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every unit test without inherited HELPERKIT settings."""
    for name in HELPERKIT_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
