# src/variable_irony/utils.py


import json
import os
import sys
from contextlib import suppress
from pathlib import Path
from typing import Any, TextIO, cast


def should_use_color() -> bool:
    """Return True if colored output should be enabled."""
    # Respect explicit overrides
    if "NO_COLOR" in os.environ:
        return False
    if os.getenv("FORCE_COLOR", "").lower() in {"1", "true", "yes"}:
        return True

    # Auto-detect: use color if output is a TTY
    return sys.stdout.isatty()


def load_json_object(path: Path) -> dict[str, Any]:
    """Load a JSON file whose root must be an object.

    An empty (or whitespace-only) file is treated as an empty object.

    Raises:
        FileNotFoundError if the path does not exist.
        ValueError on invalid syntax or a non-object root.

    """
    if not path.exists():
        xmsg = f"JSON file not found: {path}"
        raise FileNotFoundError(xmsg)

    if not path.is_file():
        xmsg = f"Expected a file: {path}"
        raise ValueError(xmsg)

    text = path.read_text(encoding="utf-8").strip()
    if not text:
        return {}

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        xmsg = (
            f"Invalid JSON syntax in {path}:"
            f" {e.msg} (line {e.lineno}, column {e.colno})"
        )
        raise ValueError(xmsg) from e

    # Guard against scalar or list roots
    if not isinstance(data, dict):
        xmsg = f"Invalid JSON root type: {type(data).__name__}"
        raise ValueError(xmsg)  # noqa: TRY004

    return cast("dict[str, Any]", data)


def dump_json(path: Path, data: dict[str, Any]) -> None:
    """Write `data` to `path` as JSON in a single write."""
    path.write_text(json.dumps(data, indent=2, sort_keys=True), encoding="utf-8")


def plural(obj: Any) -> str:
    """Return 's' if obj represents a plural count.

    Accepts ints, floats, and any object implementing __len__().
    Returns '' for exactly one.
    """
    count: int | float
    try:
        count = len(obj)
    except TypeError:
        # fallback for numbers or uncountable types
        count = obj if isinstance(obj, (int, float)) else 0
    return "s" if count != 1 else ""


def safe_log(msg: str) -> None:
    """Emergency logger that never fails."""
    stream = cast("TextIO", sys.__stderr__)
    try:
        print(msg, file=stream)
    except Exception:  # noqa: BLE001
        # As final guardrail, never crash during crash reporting
        with suppress(Exception):
            stream.write(f"[INTERNAL] {msg}\n")
