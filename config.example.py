# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables, optionally via a
local .env file (gitignored). Every value has a default.
"""

ENV_VARS = {
    # Storage
    "TODO_TASKS_PATH": "Task document used when no PATH argument is given (default: tasks.json).",
    # Logging
    "TODO_LOG_LEVEL": "Console logging level (default: WARNING).",
    "TODO_DATA_DIR": "Directory for todo.log (default: .local/todo).",
    "TODO_LOG_TO_FILE": "Write the DEBUG file log (true/false, default: true).",
}
