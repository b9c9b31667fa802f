# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Every variable is optional.

This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TASKTRACK_APP_NAME": "Name shown in the welcome banner (default: Tasktrack).",
    "TASKTRACK_LOG_LEVEL": "Console logging level (default: WARNING).",
    "TASKTRACK_LOG_TO_FILE": "Write full DEBUG logs to <data_dir>/tasktrack.log (true/false).",
    # Paths
    "TASKTRACK_DATA_DIR": "Local data directory (default: data).",
    "TASKTRACK_TASKS_PATH": "Task file path (default: <data_dir>/tasks.txt).",
}
