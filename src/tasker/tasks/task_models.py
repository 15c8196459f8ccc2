# src/tasker/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import StrEnum
from typing import Any

DEADLINE_FORMAT = "%d.%m.%Y"


class Category(StrEnum):
    """
    Closed set of category presets.

    The values are what ends up in the task file, so they must never change.
    """

    PERSONAL = "Личное"
    WORK = "Работа"
    STUDY = "Учёба"
    PROJECT = "Проект"
    OTHER = "Другое"


def parse_deadline(raw: Any) -> date | None:
    """Parse a DD.MM.YYYY deadline. Anything unparseable yields None."""
    if not isinstance(raw, str) or not raw.strip():
        return None
    try:
        return datetime.strptime(raw.strip(), DEADLINE_FORMAT).date()
    except ValueError:
        return None


def format_deadline(value: date) -> str:
    return value.strftime(DEADLINE_FORMAT)


@dataclass(slots=True)
class Task:
    description: str
    done: bool = False
    deadline: str | None = None
    category: str | None = None

    @classmethod
    def create(
        cls,
        description: str,
        deadline: str | date | None = None,
        category: str | None = None,
    ) -> Task:
        """
        New pending task.

        No validation here: the shell trims and rejects blank descriptions.
        A date deadline is formatted, a string one is stored as given.
        """
        if isinstance(deadline, date):
            deadline = format_deadline(deadline)
        if category is not None:
            category = str(category)
        return cls(description=description, done=False, deadline=deadline, category=category)

    def toggle(self) -> None:
        self.done = not self.done

    def deadline_date(self) -> date | None:
        return parse_deadline(self.deadline)

    def is_overdue(self, today: date | None = None) -> bool:
        if self.done:
            return False
        due = self.deadline_date()
        if due is None:
            return False
        if today is None:
            today = date.today()
        return due < today

    # ---- serialization ----

    def to_dict(self) -> dict[str, Any]:
        return {
            "description": self.description,
            "done": self.done,
            "deadline": self.deadline,
            "category": self.category,
        }

    @classmethod
    def from_dict(cls, raw: Any) -> Task:
        """
        Build a Task from one record of the task file.

        Accepts the minimal record shape ({"description", "done"}) too.
        Raises ValueError for anything else that does not look like a task.
        """
        if not isinstance(raw, dict):
            raise ValueError(f"task record must be an object, got {type(raw).__name__}")

        description = raw.get("description")
        if not isinstance(description, str):
            raise ValueError("task record has no string 'description'")

        done = raw.get("done", False)
        if not isinstance(done, bool):
            raise ValueError("task record 'done' must be a boolean")

        deadline = raw.get("deadline")
        if deadline is not None and not isinstance(deadline, str):
            raise ValueError("task record 'deadline' must be a string or null")

        category = raw.get("category")
        if category is not None and not isinstance(category, str):
            raise ValueError("task record 'category' must be a string or null")

        return cls(description=description, done=done, deadline=deadline, category=category)
