# tests/20-scope-tests/test_scope.py
"""Tests for variable_irony.scope.Scope."""

from dataclasses import dataclass, field
from typing import Any

import pytest

import variable_irony as app_package
import variable_irony.scope as mod_scope
from variable_irony.errors import InvalidArgumentError
from variable_irony.scope import Scope
from variable_irony.types import CacheEvent
from tests.utils import RecordingListener


@dataclass
class DictBinding:
    """Binding backed by a plain dict, recording every access."""

    name: str
    store: dict[str, Any] = field(default_factory=dict)
    reads: int = 0

    def get(self, scope: Scope) -> Any:  # noqa: ARG002
        self.reads += 1
        return self.store.get(self.name)

    def set(self, scope: Scope, value: Any) -> None:  # noqa: ARG002
        self.store[self.name] = value


def test_plain_attributes_and_items_share_storage(scope: Scope) -> None:
    # --- execute ---
    scope.answer = 42
    scope["other"] = "x"

    # --- verify ---
    assert scope["answer"] == 42
    assert scope.other == "x"
    assert scope.get("answer") == 42
    assert "answer" in scope
    assert len(scope) == 2


def test_constructor_values_become_plain_names() -> None:
    scope = Scope(a=1, b="two")
    assert scope.a == 1
    assert sorted(scope) == ["a", "b"]


def test_missing_names(scope: Scope) -> None:
    assert scope.get("missing") is None
    assert scope.get("missing", "fallback") == "fallback"
    with pytest.raises(AttributeError):
        _ = scope.missing
    with pytest.raises(KeyError):
        _ = scope["missing"]


def test_bound_name_routes_through_binding(scope: Scope) -> None:
    # --- setup ---
    binding = DictBinding("var")
    scope.bind(binding)

    # --- execute ---
    scope.var = "hello"

    # --- verify ---
    assert binding.store == {"var": "hello"}
    assert scope.var == "hello"
    assert scope["var"] == "hello"
    assert scope.get("var") == "hello"
    assert binding.reads == 3
    assert scope.is_bound("var")
    assert scope.binding("var") is binding
    assert scope.bound_names() == ["var"]


def test_bind_replaces_plain_attribute(scope: Scope) -> None:
    # --- setup ---
    scope.var = "plain"
    binding = DictBinding("var", {"var": "bound"})

    # --- execute ---
    scope.bind(binding)

    # --- verify ---
    assert scope.var == "bound"
    assert len(scope) == 1


def test_rebinding_replaces_previous_binding(scope: Scope) -> None:
    first, second = DictBinding("var", {"var": 1}), DictBinding("var", {"var": 2})
    scope.bind(first)
    scope.bind(second)
    assert scope.var == 2
    assert first.reads == 0


def test_bound_names_cannot_be_deleted(scope: Scope) -> None:
    scope.bind(DictBinding("var"))
    with pytest.raises(AttributeError):
        del scope.var


def test_plain_names_can_be_deleted(scope: Scope) -> None:
    scope.var = 1
    del scope.var
    assert "var" not in scope


@pytest.mark.parametrize("name", ["get", "set", "bind", "emit", "_bindings", ""])
def test_reserved_names_are_rejected(scope: Scope, name: str) -> None:
    with pytest.raises(InvalidArgumentError):
        scope.bind(DictBinding(name))
    with pytest.raises(InvalidArgumentError):
        scope[name] = 1


def test_listeners_are_called_in_order(scope: Scope) -> None:
    # --- setup ---
    calls: list[str] = []
    scope.add_listener("cache-write", lambda e: calls.append(f"a:{e['name']}"))
    scope.add_listener("cache-write", lambda e: calls.append(f"b:{e['name']}"))

    # --- execute ---
    scope.emit("cache-write", CacheEvent(name="kip", value=1))

    # --- verify ---
    assert calls == ["a:kip", "b:kip"]


def test_listeners_are_per_event_and_removable(scope: Scope) -> None:
    # --- setup ---
    listener = RecordingListener()
    scope.add_listener("cache-read", listener)

    # --- execute ---
    scope.emit("cache-write", CacheEvent(name="x", value=1))
    scope.emit("cache-read", CacheEvent(name="y", value=2))
    removed = scope.remove_listener("cache-read", listener)
    scope.emit("cache-read", CacheEvent(name="z", value=3))

    # --- verify ---
    assert listener.names == ["y"]
    assert removed is True
    assert scope.remove_listener("cache-read", listener) is False
    assert scope.listeners("cache-read") == ()


def test_listeners_are_per_scope() -> None:
    one, two = Scope(), Scope()
    listener = RecordingListener()
    one.add_listener("cache-write", listener)
    two.emit("cache-write", CacheEvent(name="x", value=1))
    assert listener.events == []


def test_superglobal_is_a_single_shared_scope() -> None:
    """The global handle is the same object however it is imported."""
    from variable_irony import superglobal  # noqa: PLC0415

    assert superglobal is mod_scope.superglobal
    assert superglobal is app_package.superglobal
    assert isinstance(superglobal, Scope)


def test_dir_and_repr_include_bound_names(scope: Scope) -> None:
    scope.bind(DictBinding("var"))
    scope.plain = 1
    assert "var" in dir(scope)
    assert "var" in repr(scope)
    assert "plain" in repr(scope)
