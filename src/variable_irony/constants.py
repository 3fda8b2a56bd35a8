# src/variable_irony/constants.py
"""
Central constants used across the project.
"""

# --- env keys (prefixed with PROGRAM_ENV at lookup) ---
DEFAULT_ENV_LOG_LEVEL: str = "LOG_LEVEL"
DEFAULT_ENV_CACHE_PATH: str = "CACHE_PATH"
DEFAULT_ENV_PLATFORM: str = "PLATFORM"

# --- runtime defaults ---
DEFAULT_LOG_LEVEL: str = "info"
DEFAULT_CACHE_FILENAME: str = "irony-cache.json"
DEFAULT_INITIALIZER: str = ""

# --- platforms ---
PLATFORM_NATIVE: str = "native"
PLATFORM_BROWSER: str = "browser"

# --- notifications ---
EVENT_CACHE_WRITE: str = "cache-write"
EVENT_CACHE_READ: str = "cache-read"

# --- shutdown ---
# signal names, resolved against the `signal` module where they exist
FLUSH_SIGNALS: tuple[str, ...] = ("SIGTERM", "SIGINT", "SIGHUP")
