# src/variable_irony/backend_browser.py
"""Backend for in-browser interpreters (e.g. Pyodide).

There is no process environment in a browser, so environment variables
live in an in-memory dict. Cached variables are stored in Web Storage,
one JSON-encoded item per variable, keyed "<program>:<name>".
"""

import importlib
import json
from collections.abc import Mapping
from typing import Any, Protocol

from .cache import encode_value
from .constants import PLATFORM_BROWSER
from .meta import PROGRAM_SCRIPT
from .utils_logs import get_logger


class WebStorage(Protocol):
    """The subset of the Web Storage API we use."""

    def getItem(self, key: str) -> str | None: ...  # noqa: N802

    def setItem(self, key: str, value: str) -> None: ...  # noqa: N802

    def removeItem(self, key: str) -> None: ...  # noqa: N802


class MemoryStorage:
    """Dict-backed stand-in for `window.localStorage`."""

    def __init__(self) -> None:
        self._items: dict[str, str] = {}

    def getItem(self, key: str) -> str | None:  # noqa: N802
        return self._items.get(key)

    def setItem(self, key: str, value: str) -> None:  # noqa: N802
        self._items[key] = str(value)

    def removeItem(self, key: str) -> None:  # noqa: N802
        self._items.pop(key, None)

    def __len__(self) -> int:
        return len(self._items)


def _default_storage() -> WebStorage:
    try:
        js = importlib.import_module("js")
        return js.localStorage  # type: ignore[no-any-return]
    except (ImportError, AttributeError):
        get_logger().warning(
            "Web Storage is unavailable; cached values will not outlive this page."
        )
        return MemoryStorage()


class BrowserBackend:
    name = PLATFORM_BROWSER

    def __init__(
        self,
        storage: WebStorage | None = None,
        *,
        environ: Mapping[str, object] | None = None,
        namespace: str = PROGRAM_SCRIPT,
    ) -> None:
        self.storage: WebStorage = storage if storage is not None else _default_storage()
        self.namespace = namespace
        self.environ: dict[str, str] = {
            str(k): str(v) for k, v in (environ or {}).items()
        }

    def _storage_key(self, name: str) -> str:
        return f"{self.namespace}:{name}"

    def get_environment_value(self, key: str) -> str | None:
        return self.environ.get(key)

    def set_environment_value(self, key: str, value: str) -> None:
        self.environ[key] = str(value)

    def _read(self, name: str) -> tuple[bool, Any]:
        raw = self.storage.getItem(self._storage_key(name))
        if raw is None:
            return False, None
        try:
            return True, json.loads(raw)
        except json.JSONDecodeError:
            get_logger().warning(
                "Ignoring unreadable stored value for %r: %r", name, raw
            )
            return False, None

    def get_cache_value(self, name: str) -> Any:
        return self._read(name)[1]

    def has_cache_value(self, name: str) -> bool:
        return self._read(name)[0]

    def set_cache_value(self, name: str, value: Any) -> None:
        self.storage.setItem(self._storage_key(name), encode_value(name, value))

    def flush_cache(self) -> bool:
        # Web Storage writes through; nothing is buffered
        return True

    def __repr__(self) -> str:
        return f"{type(self).__name__}(namespace={self.namespace!r})"
