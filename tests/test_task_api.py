# tests/test_task_api.py

from __future__ import annotations

from datetime import date
from types import SimpleNamespace

import pytest

from tasker.cli.bootstrap import create_initial_state
from tasker.core.errors import StorageError
from tasker.core.state import AppState
from tasker.core.view import TaskRow
from tasker.tasks import task_api
from tasker.tasks.task_models import Category
from tasker.tasks.task_store import TaskStore


def _reloaded(config: SimpleNamespace) -> TaskStore:
    return TaskStore.load(config.tasks_path)


def test_end_to_end_scenario(state: AppState, config: SimpleNamespace, today: date) -> None:
    assert task_api.list_tasks(state, today) == []

    assert task_api.add_task(state, "buy milk") is not None
    assert task_api.add_task(state, "  ") is None
    assert len(state.store) == 1
    assert _reloaded(config) == state.store
    assert task_api.list_tasks(state, today) == [TaskRow(1, False, "buy milk", None, None, False)]

    task_api.toggle_task(state, 1)
    assert task_api.list_tasks(state, today)[0].done is True
    assert _reloaded(config) == state.store
    assert _reloaded(config)[0].done is True

    task_api.remove_task(state, 1)
    assert len(state.store) == 0
    assert len(_reloaded(config)) == 0


def test_add_trims_and_persists_extras(state: AppState, config: SimpleNamespace) -> None:
    task = task_api.add_task(state, "  report  ", deadline=date(2026, 4, 1), category=Category.WORK)
    assert task is not None
    assert task.description == "report"

    loaded = _reloaded(config)
    assert loaded[0].deadline == "01.04.2026"
    assert loaded[0].category == "Работа"


def test_blank_add_does_not_touch_disk(state: AppState, config: SimpleNamespace) -> None:
    assert task_api.add_task(state, "\t\n ") is None
    assert not config.tasks_path.exists()


@pytest.mark.parametrize("position", [0, -1, 2])
def test_positions_are_bounds_checked(state: AppState, position: int) -> None:
    task_api.add_task(state, "only one")
    with pytest.raises(IndexError):
        task_api.toggle_task(state, position)
    with pytest.raises(IndexError):
        task_api.remove_task(state, position)
    assert [r.description for r in task_api.list_tasks(state)] == ["only one"]


def test_state_survives_restart(config: SimpleNamespace) -> None:
    first = create_initial_state(config=config)
    task_api.add_task(first, "a")
    task_api.add_task(first, "b")
    task_api.toggle_task(first, 2)
    task_api.set_dark_mode(first, True)

    second = create_initial_state(config=config)
    assert second.store == first.store
    assert task_api.get_settings(second).dark_mode is True


def test_set_dark_mode_writes_through(state: AppState, config: SimpleNamespace) -> None:
    assert task_api.get_settings(state).dark_mode is False
    task_api.set_dark_mode(state, True)
    assert config.settings_path.read_text("utf-8").strip().startswith("{")
    task_api.set_dark_mode(state, False)
    assert create_initial_state(config=config).settings.dark_mode is False


def _block_tasks_file(config: SimpleNamespace) -> None:
    if config.tasks_path.exists():
        config.tasks_path.unlink()
    config.tasks_path.mkdir(parents=True)


def test_failed_add_leaves_store_unchanged(state: AppState, config: SimpleNamespace) -> None:
    _block_tasks_file(config)
    with pytest.raises(StorageError):
        task_api.add_task(state, "will not land")
    assert len(state.store) == 0


def test_failed_toggle_and_remove_are_undone(state: AppState, config: SimpleNamespace) -> None:
    task_api.add_task(state, "a")
    task_api.add_task(state, "b")
    task_api.add_task(state, "c")
    snapshot = [(t.description, t.done) for t in state.store]

    _block_tasks_file(config)

    with pytest.raises(StorageError):
        task_api.toggle_task(state, 2)
    assert [(t.description, t.done) for t in state.store] == snapshot

    with pytest.raises(StorageError):
        task_api.remove_task(state, 2)
    assert [(t.description, t.done) for t in state.store] == snapshot


def test_failed_dark_mode_save_keeps_old_value(state: AppState, config: SimpleNamespace) -> None:
    config.settings_path.mkdir(parents=True)
    with pytest.raises(StorageError):
        task_api.set_dark_mode(state, True)
    assert task_api.get_settings(state).dark_mode is False
