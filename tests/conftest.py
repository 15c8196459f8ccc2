# tests/conftest.py

from __future__ import annotations

from datetime import date
from pathlib import Path
from types import SimpleNamespace

import pytest

from tasker.cli.bootstrap import create_initial_state
from tasker.core.state import AppState

TODAY = date(2026, 3, 15)


@pytest.fixture()
def config(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal config object compatible with AppState and the CLI.

    We intentionally use a SimpleNamespace rather than reading the environment,
    to keep unit tests isolated and deterministic.
    """
    data_dir = tmp_path / "data"
    return SimpleNamespace(
        app_name="tasker-test",
        log_level="WARNING",
        log_to_file=False,
        data_dir=data_dir,
        tasks_path=data_dir / "tasks.json",
        settings_path=data_dir / "settings.json",
    )


@pytest.fixture()
def state(config: SimpleNamespace) -> AppState:
    return create_initial_state(config=config)


@pytest.fixture()
def today() -> date:
    return TODAY
