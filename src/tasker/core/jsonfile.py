# src/tasker/core/jsonfile.py

"""
Flat JSON snapshot files.

Two halves with opposite error policies:
- read_json: fail-soft, returns None for anything that is not valid JSON on disk
- write_json: fail-loud, raises StorageError if the snapshot did not land
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

from .errors import StorageError

logger = logging.getLogger(__name__)


def read_json(path: str | Path) -> Any | None:
    path = Path(path)
    try:
        return json.loads(path.read_text("utf-8"))
    except FileNotFoundError:
        logger.debug("No file at %s", path)
        return None
    except (OSError, UnicodeDecodeError, ValueError):
        logger.warning("Unreadable or corrupt JSON in %s; ignoring it.", path, exc_info=True)
        return None


def write_json(path: str | Path, payload: Any) -> None:
    """Overwrite `path` with pretty-printed JSON via a temp file + os.replace."""
    path = Path(path)
    tmp = path.with_name(path.name + ".tmp")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp.write_text(json.dumps(payload, ensure_ascii=False, indent=2) + "\n", "utf-8")
        os.replace(tmp, path)
    except OSError as e:
        logger.error("Failed to write %s: %s", path, e)
        try:
            tmp.unlink(missing_ok=True)
        except OSError:
            logger.debug("Could not remove temp file %s", tmp, exc_info=True)
        raise StorageError(f"Cannot write {path}: {e}") from e
    logger.debug("Wrote %s", path)
