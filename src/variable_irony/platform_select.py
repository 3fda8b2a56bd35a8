# src/variable_irony/platform_select.py
"""Pick the backend for this process, once.

    VARIABLE_IRONY_PLATFORM=native|browser   forces a choice
    otherwise: browser when running under Emscripten with a JS `self`
    global (Pyodide in a page or worker), native everywhere else.
"""

import importlib
import os
import sys
from typing import cast

from .backend import Backend
from .backend_browser import BrowserBackend
from .backend_native import NativeBackend
from .constants import DEFAULT_ENV_PLATFORM, PLATFORM_BROWSER, PLATFORM_NATIVE
from .meta import PROGRAM_ENV
from .runtime import current_runtime
from .types import PlatformName
from .utils_logs import get_logger

_backend: Backend | None = None


def _has_browser_self() -> bool:
    try:
        js = importlib.import_module("js")
    except ImportError:
        return False
    return getattr(js, "self", None) is not None


def detect_platform() -> PlatformName:
    logger = get_logger()
    override = os.getenv(f"{PROGRAM_ENV}_{DEFAULT_ENV_PLATFORM}", "").strip().lower()
    if override in {PLATFORM_NATIVE, PLATFORM_BROWSER}:
        logger.trace("[PLATFORM] forced by environment: %s", override)
        return cast("PlatformName", override)
    if override:
        logger.warning("Unknown platform override %r; auto-detecting.", override)

    if sys.platform == "emscripten" and _has_browser_self():
        return "browser"
    return "native"


def get_backend() -> Backend:
    """Return the process-wide backend, creating it on first use."""
    global _backend  # noqa: PLW0603
    if _backend is None:
        platform_name = detect_platform()
        _backend = BrowserBackend() if platform_name == "browser" else NativeBackend()
        current_runtime["platform"] = platform_name
        get_logger().debug("[PLATFORM] using %r", _backend)
    return _backend
