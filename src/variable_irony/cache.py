# src/variable_irony/cache.py
"""In-memory cache mirrored to a JSON file.

The file is read once by `load()` and written whole by `flush()`.
`register_flush_hooks()` arranges for `flush()` to run at interpreter
exit and on SIGTERM / SIGINT / SIGHUP. Persistence is best-effort: a
crash between flushes loses the changes made since the last one.
"""

import atexit
import copy
import json
import os
import signal
import threading
from collections.abc import Iterable
from pathlib import Path
from types import FrameType
from typing import Any

from .constants import FLUSH_SIGNALS
from .errors import PersistenceUnavailableError, SerializationError
from .utils import dump_json, load_json_object, plural
from .utils_logs import get_logger


def encode_value(name: str, value: Any) -> str:
    """Return the JSON text for `value`, or raise SerializationError."""
    try:
        return json.dumps(value)
    except (TypeError, ValueError) as e:
        xmsg = f"Cannot cache {name!r}: value is not JSON-serializable ({e})"
        raise SerializationError(xmsg) from e


class CacheStore:
    """Name → JSON value mapping with optional file persistence."""

    def __init__(self, path: Path | str | None = None) -> None:
        self.path: Path | None = Path(path) if path is not None else None
        self._data: dict[str, Any] = {}
        self._hooks_registered = False

    @property
    def persistent(self) -> bool:
        return self.path is not None

    # --- persistence ---------------------------------------------------------

    def _check_access(self, path: Path) -> None:
        # read first, then write, so the message names the first failure
        if not os.access(path, os.R_OK):
            xmsg = f"Cannot read cache data from disk: {path}"
            raise PersistenceUnavailableError(xmsg)
        if not os.access(path, os.W_OK):
            xmsg = f"Cannot write to cache file: {path}"
            raise PersistenceUnavailableError(xmsg)

    def _degrade(self, reason: str) -> None:
        get_logger().warning(
            "%s\n   Cached values written during this session will not be saved.",
            reason,
        )
        self.path = None

    def load(self) -> None:
        """Populate the cache from disk.

        Missing file → empty cache. Unreadable/unwritable file, or a
        missing file in an unwritable directory → empty in-memory-only
        cache. Malformed file → empty cache that will be
        overwritten on flush.
        """
        logger = get_logger()
        if self.path is None:
            logger.trace("[CACHE] in-memory only, nothing to load")
            return

        path = self.path
        if not path.exists():
            try:
                path.parent.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                self._degrade(f"Cannot create cache directory {path.parent}: {e}")
                return
            if not os.access(path.parent, os.W_OK):
                self._degrade(f"Cannot write to cache file: {path}")
                return
            logger.debug("[CACHE] no cache file yet at %s", path)
            return

        try:
            self._check_access(path)
        except PersistenceUnavailableError as e:
            self._degrade(str(e))
            return

        try:
            loaded = load_json_object(path)
        except ValueError as e:
            logger.warning("Ignoring malformed cache file: %s", e)
            return
        except OSError as e:
            self._degrade(f"Cannot read cache data from disk: {e}")
            return

        self._data.update(loaded)
        logger.debug(
            "[CACHE] loaded %d value%s from %s", len(loaded), plural(loaded), path
        )

    def flush(self) -> bool:
        """Write the whole mapping to disk; return True if written.

        Never raises: this runs during interpreter shutdown.
        """
        logger = get_logger()
        if self.path is None:
            return False
        try:
            dump_json(self.path, self._data)
        except OSError as e:
            logger.error("Failed to save cache to %s: %s", self.path, e)
            return False
        logger.debug(
            "[CACHE] saved %d value%s to %s",
            len(self._data),
            plural(self._data),
            self.path,
        )
        return True

    def _make_signal_handler(self, previous: Any) -> Any:
        def handler(signum: int, frame: FrameType | None) -> None:
            self.flush()
            if callable(previous):
                previous(signum, frame)
            elif previous == signal.SIG_DFL:
                signal.signal(signum, signal.SIG_DFL)
                os.kill(os.getpid(), signum)
            # SIG_IGN / None: the signal was being ignored, keep running

        return handler

    def register_flush_hooks(self, signals: Iterable[str] = FLUSH_SIGNALS) -> None:
        """Flush at interpreter exit and on termination signals (once per store)."""
        logger = get_logger()
        if self._hooks_registered:
            return
        self._hooks_registered = True

        atexit.register(self.flush)
        logger.trace("[CACHE] registered atexit flush")

        if threading.current_thread() is not threading.main_thread():
            logger.debug("[CACHE] not on main thread; signal flush hooks skipped")
            return

        for signame in signals:
            signum = getattr(signal, signame, None)
            if signum is None:
                continue  # e.g. SIGHUP on Windows
            previous = signal.getsignal(signum)
            signal.signal(signum, self._make_signal_handler(previous))
            logger.trace("[CACHE] registered %s flush handler", signame)

    # --- mapping -------------------------------------------------------------

    def get(self, name: str, default: Any = None) -> Any:
        """Return a copy of the stored value; mutating it does not touch the cache."""
        return copy.deepcopy(self._data.get(name, default))

    def contains(self, name: str) -> bool:
        return name in self._data

    def set(self, name: str, value: Any) -> None:
        """Store the JSON round-trip of `value` under `name`."""
        self._data[name] = json.loads(encode_value(name, value))

    def delete(self, name: str) -> None:
        del self._data[name]

    def names(self) -> list[str]:
        return list(self._data)

    def snapshot(self) -> dict[str, Any]:
        return copy.deepcopy(self._data)

    def __len__(self) -> int:
        return len(self._data)
