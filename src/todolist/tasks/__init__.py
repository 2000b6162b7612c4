"""
Task subsystem.

Components:
- task_models.py: data structure (Task)
- task_store.py: ordered in-memory TaskList
- task_file.py: line-oriented text persistence (load/save)
"""
