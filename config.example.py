# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Use .env (local, gitignored) for per-machine values.

This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "TASKDESK_APP_NAME": "App display name shown in the list header (default: taskdesk).",
    "TASKDESK_LOG_LEVEL": "Console logging level (default: INFO). The log file always gets DEBUG.",
    "TASKDESK_DATA_DIR": "Local data directory for taskdesk.log (default: .local/taskdesk).",
    # Task Store
    "TASKDESK_API_BASE_URL": "Task Store REST base URL (default: http://localhost:5000/api/tasks).",
    "TASKDESK_CONNECT_TIMEOUT_SECONDS": "HTTP connect timeout (default: 5.0).",
    "TASKDESK_READ_TIMEOUT_SECONDS": "HTTP read timeout (default: 15.0).",
    "TASKDESK_WRITE_TIMEOUT_SECONDS": "HTTP write timeout (default: 10.0).",
    # Initial view
    "TASKDESK_DEFAULT_FILTER": "Initial filter: all | pending | completed (default: all).",
    "TASKDESK_DEFAULT_SORT": "Initial sort: priority | status (default: priority).",
}
