# src/variable_irony/backend.py
"""The contract every platform backend implements.

Bindings only talk to a backend through these methods, so the same
binding code serves both the native and the browser platform.
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Backend(Protocol):
    name: str

    def get_environment_value(self, key: str) -> str | None: ...

    def set_environment_value(self, key: str, value: str) -> None: ...

    def get_cache_value(self, name: str) -> Any: ...

    def has_cache_value(self, name: str) -> bool: ...

    def set_cache_value(self, name: str, value: Any) -> None: ...

    def flush_cache(self) -> bool: ...
