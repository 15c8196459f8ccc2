"""tasker: a personal task list with flat JSON persistence."""

__version__ = "0.2.0"
