"""
Task subsystem.

Components:
- task_models.py: data structures (Task, Priority)
- task_storage.py: JSON file persistence (whole collection per save)
- task_store.py: in-memory collection, id allocation, CRUD + category filter
- task_stats.py: derived counts for reporting
- errors.py: error types shared with the shell
"""
