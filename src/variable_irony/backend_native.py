# src/variable_irony/backend_native.py
"""Backend for regular interpreters: real environment, file-backed cache."""

import os
from collections.abc import MutableMapping
from pathlib import Path
from typing import Any

from .cache import CacheStore
from .constants import PLATFORM_NATIVE
from .datastore import default_cache_path


class NativeBackend:
    """Environment from `os.environ`, cache persisted to a JSON file.

    `cache_path=None` resolves the default location; `in_memory=True`
    skips persistence entirely.
    """

    name = PLATFORM_NATIVE

    def __init__(
        self,
        cache_path: Path | str | None = None,
        *,
        environ: MutableMapping[str, str] | None = None,
        in_memory: bool = False,
        register_hooks: bool = True,
    ) -> None:
        self.environ: MutableMapping[str, str] = (
            os.environ if environ is None else environ
        )

        if in_memory:
            path: Path | None = None
        else:
            path = Path(cache_path) if cache_path is not None else default_cache_path()

        self.cache = CacheStore(path)
        self.cache.load()
        if register_hooks and self.cache.persistent:
            self.cache.register_flush_hooks()

    def get_environment_value(self, key: str) -> str | None:
        return self.environ.get(key)

    def set_environment_value(self, key: str, value: str) -> None:
        self.environ[key] = str(value)

    def get_cache_value(self, name: str) -> Any:
        return self.cache.get(name)

    def has_cache_value(self, name: str) -> bool:
        return self.cache.contains(name)

    def set_cache_value(self, name: str, value: Any) -> None:
        self.cache.set(name, value)

    def flush_cache(self) -> bool:
        return self.cache.flush()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(cache={self.cache.path})"
