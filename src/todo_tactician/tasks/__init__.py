"""
Task subsystem.

Components:
- task_models.py: Task record, field limits and calendar helpers
- task_store.py: in-memory store with id allocation and swap-remove deletion
- task_query.py: sort orders and filters over a snapshot of the store
"""
