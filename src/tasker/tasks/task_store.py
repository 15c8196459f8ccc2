# src/tasker/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

from ..core.jsonfile import read_json, write_json
from .task_models import Task

logger = logging.getLogger(__name__)


class TaskStore:
    """
    Ordered in-memory task list backed by one JSON file.

    Identity is positional: index i is the i-th task in insertion order.
    Mutations never touch the disk; callers save right after mutating.

    Error policy:
    - load() is fail-soft: missing/corrupt file -> empty store
    - save() is fail-loud: StorageError propagates to the caller
    """

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = list(tasks or [])

    # ---- persistence ----

    @classmethod
    def load(cls, path: str | Path) -> TaskStore:
        data = read_json(path)
        if data is None:
            return cls()
        if not isinstance(data, list):
            logger.warning("Task file %s does not hold a list; starting empty.", path)
            return cls()
        try:
            tasks = [Task.from_dict(item) for item in data]
        except ValueError as e:
            logger.warning("Task file %s has a malformed record (%s); starting empty.", path, e)
            return cls()
        logger.debug("Loaded %d tasks from %s", len(tasks), path)
        return cls(tasks)

    def save(self, path: str | Path) -> None:
        write_json(path, [t.to_dict() for t in self._tasks])
        logger.debug("Saved %d tasks to %s", len(self._tasks), path)

    # ---- mutations ----

    def append(self, task: Task) -> None:
        self._tasks.append(task)

    def insert(self, index: int, task: Task) -> None:
        """Put `task` back at `index` (0..len); later tasks shift up by one."""
        if not 0 <= index <= len(self._tasks):
            raise IndexError(f"insert index {index} out of range (0..{len(self._tasks)})")
        self._tasks.insert(index, task)

    def toggle_done(self, index: int) -> Task:
        task = self._tasks[self._check_index(index)]
        task.toggle()
        return task

    def remove(self, index: int) -> Task:
        return self._tasks.pop(self._check_index(index))

    def _check_index(self, index: int) -> int:
        # Negative indexes would silently hit a different task.
        if not 0 <= index < len(self._tasks):
            raise IndexError(f"task index {index} out of range (0..{len(self._tasks) - 1})")
        return index

    # ---- read access ----

    @property
    def tasks(self) -> list[Task]:
        """Shallow copy; mutate through the store methods."""
        return list(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def __getitem__(self, index: int) -> Task:
        return self._tasks[self._check_index(index)]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TaskStore):
            return NotImplemented
        return self._tasks == other._tasks

    def __repr__(self) -> str:
        return f"TaskStore({self._tasks!r})"
