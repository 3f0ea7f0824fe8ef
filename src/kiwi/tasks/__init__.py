"""
Task subsystem.

Components:
- datetime_codec.py: parsing/formatting of the accepted date/time forms
- task_models.py: data structures (Task, TaskKind)
- task_list.py: ordered, 1-based task collection + substring search
- task_store.py: pipe-delimited text file storage
"""
