"""
Task subsystem.

Components:
- task_models.py: data structures (Task, ShowMode, Scope)
- task_codec.py: one task <-> one line of text
- task_store.py: plain-text file storage (load / append / overwrite)
- validation.py: date and time format contracts
- task_api.py: create / edit / complete / delete over a loaded list
- task_query.py: list filtering and fuzzy search
"""
