# src/tasker/core/errors.py

from __future__ import annotations


class StorageError(RuntimeError):
    """A snapshot could not be written to disk. Never swallowed: unsaved data would be lost."""
