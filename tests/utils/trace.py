# tests/utils/trace.py

import builtins
import importlib
import os
from collections.abc import Callable

TRACE_ENABLED = os.environ.get("TRACE", "").lower() in {"1", "true", "yes"}


def make_trace(icon: str = "🧪") -> Callable[..., None]:
    def local_trace(label: str, *args: object) -> None:
        TRACE(f"{icon} {label}", *args)

    return local_trace


def TRACE(label: str, *args: object) -> None:  # noqa: N802
    """Lightweight print for debugging test runs (enable with TRACE=1)."""
    if not TRACE_ENABLED:
        return

    # Avoid using a possibly monkeypatched "time" from sys.modules
    _real_time = importlib.import_module("time")

    ts = _real_time.monotonic()
    # builtins.print more reliable than sys.stdout.write + sys.stdout.flush
    builtins.print(f"[TRACE {ts:.6f}] {label}:", *args, flush=True)
