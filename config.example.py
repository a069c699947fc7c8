# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "TASKTRACKER_APP_NAME": "App display name (default: tasktracker).",
    "TASKTRACKER_LOG_LEVEL": "Console logging level (default: INFO).",
    "TASKTRACKER_LOG_TO_FILE": "Write a full DEBUG log to <data_dir>/tasktracker.log (true/false).",
    # Front-end
    "TASKTRACKER_CONSOLE_ENABLED": "Run the interactive console (true/false, default: true).",
    "TASKTRACKER_DEMO_ON_START": "Seed the three sample tasks at startup (true/false).",
    "TASKTRACKER_DEFAULT_PRIORITY": "Priority used by /add without -p (low|medium|high).",
    # Paths (gitignored)
    "TASKTRACKER_DATA_DIR": "Local data directory (default: .local/tasktracker).",
}
