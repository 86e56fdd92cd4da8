"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskFields, Priority, Status, drafts, view selection)
- task_client.py: HTTP Task Store client (httpx) for list/get/create/update/delete
"""
