"""
Task subsystem.

Components:
- task_models.py: data structures (Task, Category) and deadline parsing
- task_store.py: ordered JSON-backed task list
- task_api.py: write-through operations used by the shells
"""
