# src/tasker/tasks/task_api.py

"""
High-level operations the shells call.

Each mutation is written through to disk right away (full snapshot, no
batching). A failed save undoes the in-memory change before the
StorageError propagates. Positions are 1-based, as shown to the user.
"""

from __future__ import annotations

import logging
from datetime import date

from ..core.errors import StorageError
from ..core.settings import Settings
from ..core.state import AppState
from ..core.view import TaskRow, task_rows
from .task_models import Task

logger = logging.getLogger(__name__)


def _index_for(state: AppState, position: int) -> int:
    if not 1 <= position <= len(state.store):
        raise IndexError(f"no task at position {position} (have {len(state.store)})")
    return position - 1


def add_task(
    state: AppState,
    description: str,
    deadline: str | date | None = None,
    category: str | None = None,
) -> Task | None:
    """Append a task and persist it. Blank descriptions are ignored (returns None)."""
    text = (description or "").strip()
    if not text:
        logger.info("Ignoring blank task description.")
        return None

    task = Task.create(text, deadline=deadline, category=category)
    state.store.append(task)
    try:
        state.store.save(state.tasks_path)
    except StorageError:
        state.store.remove(len(state.store) - 1)
        raise
    logger.info(
        "Task added position=%d deadline=%s category=%s",
        len(state.store),
        task.deadline,
        task.category,
    )
    return task


def list_tasks(state: AppState, today: date | None = None) -> list[TaskRow]:
    return task_rows(state.store, today=today)


def toggle_task(state: AppState, position: int) -> Task:
    index = _index_for(state, position)
    task = state.store.toggle_done(index)
    try:
        state.store.save(state.tasks_path)
    except StorageError:
        state.store.toggle_done(index)
        raise
    logger.info("Task toggled position=%d done=%s", position, task.done)
    return task


def remove_task(state: AppState, position: int) -> Task:
    index = _index_for(state, position)
    task = state.store.remove(index)
    try:
        state.store.save(state.tasks_path)
    except StorageError:
        state.store.insert(index, task)
        raise
    logger.info("Task removed position=%d remaining=%d", position, len(state.store))
    return task


def get_settings(state: AppState) -> Settings:
    return state.settings


def set_dark_mode(state: AppState, enabled: bool) -> Settings:
    previous = state.settings.dark_mode
    state.settings.dark_mode = bool(enabled)
    try:
        state.settings.save(state.settings_path)
    except StorageError:
        state.settings.dark_mode = previous
        raise
    logger.info("Dark mode set to %s", state.settings.dark_mode)
    return state.settings
