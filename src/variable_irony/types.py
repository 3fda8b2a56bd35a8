# src/variable_irony/types.py
from __future__ import annotations

from collections.abc import Callable
from typing import Any, Literal, TypedDict

from typing_extensions import NotRequired

PlatformName = Literal["native", "browser"]


class CacheEvent(TypedDict):
    name: str  # variable name the value belongs to
    value: Any  # value written, or value at time of read


Listener = Callable[[CacheEvent], None]


class Runtime(TypedDict):
    log_level: str
    use_color: bool

    # set once the backend has been chosen
    platform: NotRequired[PlatformName]
