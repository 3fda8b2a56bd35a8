# src/variable_irony/scope.py
"""Scope objects: namespaces that variables are bound onto.

A `Scope` behaves like a plain namespace. Names that carry a binding
route every read and write through that binding instead:

    scope = Scope()
    link_environment_variable("home", scope=scope)
    scope.home          # reads $HOME
    scope["home"]       # same thing
    scope.home = "/tmp" # writes $HOME

Scopes also keep one listener list per event name, used by cached
variables to publish "cache-read" / "cache-write" notifications.
"""

from collections.abc import Iterator
from typing import Any, Protocol

from .errors import InvalidArgumentError
from .types import CacheEvent, Listener

_INTERNAL = ("_bindings", "_listeners")


class Binding(Protocol):
    @property
    def name(self) -> str: ...

    def get(self, scope: "Scope") -> Any: ...

    def set(self, scope: "Scope", value: Any) -> None: ...


class Scope:
    """Namespace with optional per-name bindings and event listeners."""

    def __init__(self, **values: Any) -> None:
        object.__setattr__(self, "_bindings", {})
        object.__setattr__(self, "_listeners", {})
        for name, value in values.items():
            self.set(name, value)

    # --- names ---------------------------------------------------------------

    def _check_name(self, name: object) -> str:
        if not isinstance(name, str) or not name:
            xmsg = f"Scope names must be non-empty strings, not {name!r}"
            raise InvalidArgumentError(xmsg)
        if name in _INTERNAL or hasattr(type(self), name):
            xmsg = f"{name!r} is reserved by {type(self).__name__}"
            raise InvalidArgumentError(xmsg)
        return name

    def _plain(self) -> dict[str, Any]:
        return {k: v for k, v in self.__dict__.items() if k not in _INTERNAL}

    # --- bindings ------------------------------------------------------------

    def bind(self, binding: Binding) -> None:
        """Install `binding` under its name, replacing any previous one."""
        name = self._check_name(binding.name)
        self.__dict__.pop(name, None)
        self._bindings[name] = binding

    def is_bound(self, name: str) -> bool:
        return name in self._bindings

    def binding(self, name: str) -> Binding:
        """Return the binding record for `name` (KeyError if unbound)."""
        return self._bindings[name]

    def bound_names(self) -> list[str]:
        return list(self._bindings)

    # --- explicit access -----------------------------------------------------

    def get(self, name: str, default: Any = None) -> Any:
        if name in self._bindings:
            return self._bindings[name].get(self)
        return self._plain().get(name, default)

    def set(self, name: str, value: Any) -> None:
        if name in self._bindings:
            self._bindings[name].set(self, value)
            return
        object.__setattr__(self, self._check_name(name), value)

    # --- listeners -----------------------------------------------------------

    def add_listener(self, event: str, callback: Listener) -> None:
        self._listeners.setdefault(event, []).append(callback)

    def remove_listener(self, event: str, callback: Listener) -> bool:
        """Unregister `callback`; return False if it was not registered."""
        callbacks = self._listeners.get(event, [])
        if callback not in callbacks:
            return False
        callbacks.remove(callback)
        return True

    def listeners(self, event: str) -> tuple[Listener, ...]:
        return tuple(self._listeners.get(event, ()))

    def emit(self, event: str, payload: CacheEvent) -> None:
        """Call every listener for `event` synchronously, in order."""
        for callback in self.listeners(event):
            callback(payload)

    # --- sugar ---------------------------------------------------------------

    def __getattr__(self, name: str) -> Any:
        # only reached when normal lookup fails
        bindings = self.__dict__.get("_bindings", {})
        if name in bindings:
            return bindings[name].get(self)
        xmsg = f"{type(self).__name__!r} object has no attribute {name!r}"
        raise AttributeError(xmsg)

    def __setattr__(self, name: str, value: Any) -> None:
        self.set(name, value)

    def __delattr__(self, name: str) -> None:
        if name in self._bindings:
            xmsg = f"Cannot delete bound variable {name!r}"
            raise AttributeError(xmsg)
        if name in _INTERNAL:
            xmsg = f"Cannot delete {name!r}"
            raise AttributeError(xmsg)
        object.__delattr__(self, name)

    def __getitem__(self, name: str) -> Any:
        if name in self._bindings:
            return self._bindings[name].get(self)
        try:
            return self._plain()[name]
        except KeyError:
            raise KeyError(name) from None

    def __setitem__(self, name: str, value: Any) -> None:
        self.set(name, value)

    def __contains__(self, name: object) -> bool:
        return name in self._bindings or name in self._plain()

    def __iter__(self) -> Iterator[str]:
        yield from self._bindings
        yield from self._plain()

    def __len__(self) -> int:
        return len(self._bindings) + len(self._plain())

    def __dir__(self) -> list[str]:
        return sorted({*super().__dir__(), *self._bindings})

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(bound={self.bound_names()!r},"
            f" plain={sorted(self._plain())!r})"
        )


# Process-wide default target for bindings.
superglobal = Scope()
