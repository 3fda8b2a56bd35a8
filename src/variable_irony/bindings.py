# src/variable_irony/bindings.py
"""Bind environment variables and cached values onto a scope.

Example:
    # Natively LD_LIBRARY_PATH=/usr/lib/libsomelib.so
    link_environment_variable("ldLibraryPath")
    superglobal.ldLibraryPath          # "/usr/lib/libsomelib.so"

    create_cached_variable("lastRun", 0)
    superglobal.lastRun += 1           # persisted on exit

In the browser there is no environment to read from, so linked
variables start at their initializer.
"""

from dataclasses import dataclass
from typing import Any

from .backend import Backend
from .constants import DEFAULT_INITIALIZER, EVENT_CACHE_READ, EVENT_CACHE_WRITE
from .errors import InvalidArgumentError
from .names import translate_name
from .platform_select import get_backend
from .scope import Scope, superglobal
from .types import CacheEvent
from .utils_logs import get_logger


@dataclass(frozen=True)
class EnvironmentBinding:
    name: str
    real_key: str
    backend: Backend

    def get(self, scope: Scope) -> str | None:  # noqa: ARG002
        return self.backend.get_environment_value(self.real_key)

    def set(self, scope: Scope, value: Any) -> None:  # noqa: ARG002
        self.backend.set_environment_value(self.real_key, str(value))


@dataclass(frozen=True)
class CacheBinding:
    name: str
    backend: Backend

    def get(self, scope: Scope) -> Any:
        value = self.backend.get_cache_value(self.name)
        scope.emit(EVENT_CACHE_READ, CacheEvent(name=self.name, value=value))
        return value

    def set(self, scope: Scope, value: Any) -> None:
        self.backend.set_cache_value(self.name, value)
        # report what was stored (the JSON round-trip), same as a read would
        stored = self.backend.get_cache_value(self.name)
        scope.emit(EVENT_CACHE_WRITE, CacheEvent(name=self.name, value=stored))


def _resolve_scope(scope: Scope | None) -> Scope:
    if scope is None:
        return superglobal  # No target scope? Use global!
    if not isinstance(scope, Scope):
        xmsg = f"'scope' argument must be a Scope, not {type(scope).__name__!r}"
        raise InvalidArgumentError(xmsg)
    return scope


def link_environment_variable(
    name: str,
    real_name: str | None = None,
    initializer: object = None,
    scope: Scope | None = None,
    *,
    backend: Backend | None = None,
) -> str:
    """Bind environment variable `name` onto `scope` and return its real key.

    The real key is derived from `name` (camelCase or snake_case →
    UPPER_SNAKE_CASE) unless `real_name` overrides it. When the variable
    is unset it is set to `initializer` (coerced to str, default "").

    Raises:
        InvalidArgumentError for an empty name, empty real_name, or a
        scope that is not a Scope.

    """
    logger = get_logger()
    real_key = translate_name(name, real_name)
    target = _resolve_scope(scope)
    backend = backend if backend is not None else get_backend()

    default = DEFAULT_INITIALIZER if initializer is None else str(initializer)

    target.bind(EnvironmentBinding(name=name, real_key=real_key, backend=backend))
    logger.debug("[BIND] %s → $%s", name, real_key)

    if target[name] is None:
        logger.trace("[BIND] %s unset, initializing to %r", real_key, default)
        target[name] = default

    return real_key


def create_cached_variable(
    name: str,
    initializer: Any = None,
    scope: Scope | None = None,
    *,
    backend: Backend | None = None,
) -> None:
    """Bind a cached, persisted variable `name` onto `scope`.

    Writes store the value and emit "cache-write" on the scope; reads
    emit "cache-read". Both events carry {"name": ..., "value": ...}.
    When `initializer` is given and nothing is cached yet, the variable
    is set to it once.

    Raises:
        InvalidArgumentError for an empty name or a scope that is not a
        Scope.
        SerializationError (on write) for values JSON cannot encode.

    """
    logger = get_logger()
    if not isinstance(name, str) or not name:
        xmsg = "'name' argument cannot be empty."
        raise InvalidArgumentError(xmsg)
    target = _resolve_scope(scope)
    backend = backend if backend is not None else get_backend()

    target.bind(CacheBinding(name=name, backend=backend))
    logger.debug("[BIND] %s → cache", name)

    if initializer is not None and not backend.has_cache_value(name):
        logger.trace("[BIND] %s not cached, initializing to %r", name, initializer)
        target[name] = initializer
