# src/tasker/core/settings.py

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from .jsonfile import read_json, write_json

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class Settings:
    """User preferences persisted next to the task file."""

    dark_mode: bool = False

    @classmethod
    def load(cls, path: str | Path) -> Settings:
        data = read_json(path)
        if data is None:
            return cls()
        if not isinstance(data, dict):
            logger.warning("Settings file %s is not an object; using defaults.", path)
            return cls()
        dark_mode = data.get("dark_mode", False)
        if not isinstance(dark_mode, bool):
            logger.warning("Settings file %s has non-boolean dark_mode; using defaults.", path)
            return cls()
        return cls(dark_mode=dark_mode)

    def save(self, path: str | Path) -> None:
        write_json(path, {"dark_mode": self.dark_mode})
