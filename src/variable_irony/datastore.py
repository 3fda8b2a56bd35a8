# src/variable_irony/datastore.py
"""Locate the directories used to persist cached variables.

Persistent store, by platform:
  - Windows:  %APPDATA%/<program>   (or ~/<program> without APPDATA)
  - macOS:    ~/Library/Preferences/<program>
  - others:   ~/.local/share/<program>

When no home directory can be determined (or the directory cannot be
created) a per-process temporary directory is used instead, unless
`strict` is requested.
"""

import getpass
import os
import sys
import tempfile
import time
from pathlib import Path

from .constants import DEFAULT_CACHE_FILENAME, DEFAULT_ENV_CACHE_PATH
from .errors import PersistenceUnavailableError
from .meta import PROGRAM_ENV, PROGRAM_SCRIPT
from .utils_logs import get_logger

_persistent_stores: dict[str, Path] = {}
_temporary_stores: dict[str, Path] = {}
# persistent lookups that fell back to a temporary store (warned once)
_fallback_stores: dict[str, Path] = {}


def _home_dir() -> Path | None:
    try:
        home = Path.home()
    except RuntimeError:
        return None
    # Path.home() can return "~" unchanged when nothing resolves it
    return None if str(home) in {"", "~"} else home


def _username() -> str:
    try:
        return getpass.getuser()
    except (KeyError, OSError):
        return "unknown"


def get_temporary_data_store(program_name: str = PROGRAM_SCRIPT) -> Path:
    """Return this process's temporary data directory, creating it once."""
    if program_name in _temporary_stores:
        return _temporary_stores[program_name]

    millis = int(time.time() * 1000)
    identity = f"{program_name}U{_username()}T{millis}PID{os.getpid()}-"
    path = Path(tempfile.mkdtemp(prefix=identity))
    get_logger().debug("Using temporary data store: %s", path)

    _temporary_stores[program_name] = path
    return path


def _persistent_candidate(program_name: str) -> Path | None:
    appdata = os.getenv("APPDATA")
    if appdata:
        return Path(appdata) / program_name

    home = _home_dir()
    if home is None:
        return None

    if sys.platform == "win32":
        return home / program_name
    if sys.platform == "darwin":
        return home / "Library" / "Preferences" / program_name
    return home / ".local" / "share" / program_name


def _fall_back(program_name: str, reason: str) -> Path:
    get_logger().warning("%s Falling back to a temporary one.", reason)
    path = get_temporary_data_store(program_name)
    _fallback_stores[program_name] = path
    return path


def get_persistent_data_store(
    program_name: str = PROGRAM_SCRIPT,
    *,
    strict: bool = False,
) -> Path:
    """Return the per-user data directory, creating it if needed.

    Falls back to the temporary store when no location can be found or
    created. With `strict=True` that situation raises
    `PersistenceUnavailableError` instead.
    """
    if program_name in _persistent_stores:
        return _persistent_stores[program_name]
    if not strict and program_name in _fallback_stores:
        return _fallback_stores[program_name]

    candidate = _persistent_candidate(program_name)

    if candidate is None:
        xmsg = "Could not find a persistent data store (no home directory)."
        if strict:
            raise PersistenceUnavailableError(xmsg)
        return _fall_back(program_name, xmsg)

    try:
        candidate.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        xmsg = f"Could not create persistent data store {candidate}: {e}"
        if strict:
            raise PersistenceUnavailableError(xmsg) from e
        return _fall_back(program_name, xmsg)

    _persistent_stores[program_name] = candidate
    return candidate


def default_cache_path() -> Path:
    """Return the cache file location, honoring VARIABLE_IRONY_CACHE_PATH."""
    override = os.getenv(f"{PROGRAM_ENV}_{DEFAULT_ENV_CACHE_PATH}")
    if override:
        return Path(override).expanduser()
    return get_persistent_data_store() / DEFAULT_CACHE_FILENAME
