"""
Core pieces shared by every shell.

Components:
- errors.py: StorageError
- jsonfile.py: fail-soft JSON read / fail-loud atomic JSON write
- settings.py: persisted user preferences (dark mode)
- state.py: AppState owned by the running shell
- view.py: pure derived display data (progress, overdue, category labels)
"""
