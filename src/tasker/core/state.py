# src/tasker/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..tasks.task_store import TaskStore
from .settings import Settings


@dataclass
class AppState:
    """
    Everything a shell holds for one run.

    The shell owns exactly one TaskStore and passes this state into the
    task_api functions; rendering code only reads from it.
    """

    # Config (or any object with tasks_path / settings_path attributes).
    config: object

    store: TaskStore
    settings: Settings

    @property
    def tasks_path(self) -> Path:
        return Path(self.config.tasks_path)  # type: ignore[attr-defined]

    @property
    def settings_path(self) -> Path:
        return Path(self.config.settings_path)  # type: ignore[attr-defined]
