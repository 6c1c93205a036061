"""
Task subsystem.

Components:
- task_models.py: data structures (Task, EditSession) and record conversion
- task_store.py: whole-collection snapshot load/save over a key-value store
- task_list.py: controller owning the collection and the edit session
"""
