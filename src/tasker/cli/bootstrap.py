# src/tasker/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- takes the config (or reads it once),
- loads the task store and the settings into AppState.

No directories are created here: loads tolerate a missing data dir and
saves create it on first write.
"""

from __future__ import annotations

import logging

from ..config import get_config
from ..core.settings import Settings
from ..core.state import AppState
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_initial_state(*, config=None) -> AppState:
    """
    Create AppState from the provided config.

    Keeping config injectable makes the app easier to test and avoids hidden global reads.
    If config is None, falls back to get_config().
    """
    if config is None:
        config = get_config()

    state = AppState(
        config=config,
        store=TaskStore.load(config.tasks_path),
        settings=Settings.load(config.settings_path),
    )
    logger.debug(
        "State ready tasks=%d (%s) dark_mode=%s (%s)",
        len(state.store),
        config.tasks_path,
        state.settings.dark_mode,
        config.settings_path,
    )
    return state
