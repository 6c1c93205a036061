# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "NEXUS_APP_NAME": "App display name, shown as the list title (default: nexus-todo).",
    "NEXUS_LOG_LEVEL": "Console logging level (default: WARNING). The log file always gets DEBUG.",
    # Paths (gitignored)
    "NEXUS_DATA_DIR": "Local data directory for the store and logs (default: .local/nexus).",
    "NEXUS_STORE_PATH": "SQLite key-value store path (default: <data_dir>/store.sqlite3).",
    # Task list
    "NEXUS_STORAGE_KEY": "Key the task snapshot is stored under (default: todos).",
    "NEXUS_ADD_DELAY_MS": "Delay before a new task appears, in ms (default: 300).",
    # Console
    "NEXUS_CONSOLE_COLOR": "Use ANSI colors in the console (true/false, default: true).",
}
