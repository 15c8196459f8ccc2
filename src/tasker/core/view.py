# src/tasker/core/view.py

"""
Derived display data for the shells.

Everything here is pure: it reads a snapshot of tasks and returns values,
it never mutates a Task or touches the disk.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date
from enum import StrEnum
from typing import NamedTuple

from ..tasks.task_models import Category, Task

LOW_BAND_LIMIT = 0.3
HIGH_BAND_LIMIT = 0.7


class CompletionBand(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


BAND_COLORS: dict[CompletionBand, str] = {
    CompletionBand.LOW: "#E53935",
    CompletionBand.MEDIUM: "#FB8C00",
    CompletionBand.HIGH: "#43A047",
}


class CategoryLabel(NamedTuple):
    text: str
    color: str


CATEGORY_LABELS: dict[str, CategoryLabel] = {
    Category.PERSONAL: CategoryLabel("Личное", "#42A5F5"),
    Category.WORK: CategoryLabel("Работа", "#EF5350"),
    Category.STUDY: CategoryLabel("Учёба", "#AB47BC"),
    Category.PROJECT: CategoryLabel("Проект", "#26A69A"),
    Category.OTHER: CategoryLabel("Другое", "#8D6E63"),
}

UNKNOWN_CATEGORY = CategoryLabel("?", "#9E9E9E")


class TaskRow(NamedTuple):
    position: int  # 1-based
    done: bool
    description: str
    deadline: str | None
    category: str | None
    overdue: bool


def completion_counts(tasks: Iterable[Task]) -> tuple[int, int]:
    done = total = 0
    for t in tasks:
        total += 1
        if t.done:
            done += 1
    return done, total


def completion_ratio(tasks: Iterable[Task]) -> float:
    done, total = completion_counts(tasks)
    if total == 0:
        return 0.0
    return done / total


def completion_band(ratio: float) -> CompletionBand:
    if ratio < LOW_BAND_LIMIT:
        return CompletionBand.LOW
    if ratio < HIGH_BAND_LIMIT:
        return CompletionBand.MEDIUM
    return CompletionBand.HIGH


def category_label(category: str | None) -> CategoryLabel:
    if category is None:
        return UNKNOWN_CATEGORY
    return CATEGORY_LABELS.get(category, UNKNOWN_CATEGORY)


def overdue_flags(tasks: Iterable[Task], today: date | None = None) -> list[bool]:
    if today is None:
        today = date.today()
    return [t.is_overdue(today) for t in tasks]


def task_rows(tasks: Iterable[Task], today: date | None = None) -> list[TaskRow]:
    if today is None:
        today = date.today()
    return [
        TaskRow(
            position=i,
            done=t.done,
            description=t.description,
            deadline=t.deadline,
            category=t.category,
            overdue=t.is_overdue(today),
        )
        for i, t in enumerate(tasks, start=1)
    ]


def format_row(row: TaskRow) -> str:
    mark = "x" if row.done else " "
    line = f"{row.position}. [{mark}] {row.description}"
    if row.category:
        line += f" [{row.category}]"
    if row.deadline:
        line += f" (до {row.deadline})"
    if row.overdue:
        line += " (просрочено)"
    return line
