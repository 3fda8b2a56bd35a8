# src/variable_irony/__init__.py

"""Variable Irony: environment variables and cached values as plain variables.

Full developer API
==================
This package re-exports all non-private symbols from its submodules,
making it suitable for programmatic use or custom integrations.
Anything prefixed with "_" is considered internal and may change.

Highlights:
    - link_environment_variable() → Bind an environment variable onto a scope
    - create_cached_variable()    → Bind a persisted, observable value
    - superglobal                 → The default scope
    - get_backend()               → The platform backend for this process
"""

from .backend import Backend
from .backend_browser import BrowserBackend, MemoryStorage
from .backend_native import NativeBackend
from .bindings import (
    CacheBinding,
    EnvironmentBinding,
    create_cached_variable,
    link_environment_variable,
)
from .cache import CacheStore
from .cli import main
from .constants import (
    DEFAULT_CACHE_FILENAME,
    DEFAULT_LOG_LEVEL,
    EVENT_CACHE_READ,
    EVENT_CACHE_WRITE,
    FLUSH_SIGNALS,
)
from .datastore import (
    default_cache_path,
    get_persistent_data_store,
    get_temporary_data_store,
)
from .errors import (
    InvalidArgumentError,
    IronyError,
    PersistenceUnavailableError,
    SerializationError,
)
from .meta import (
    PROGRAM_DISPLAY,
    PROGRAM_ENV,
    PROGRAM_PACKAGE,
    PROGRAM_SCRIPT,
    VERSION,
)
from .names import is_camel_case, translate_name
from .platform_select import detect_platform, get_backend
from .runtime import current_runtime
from .scope import Binding, Scope, superglobal
from .types import CacheEvent, PlatformName
from .utils_logs import LEVEL_ORDER, get_logger, set_log_level

__version__ = VERSION

__all__ = [  # noqa: RUF022
    # --- Bindings ---
    "create_cached_variable",
    "link_environment_variable",
    "superglobal",
    #
    # --- Names ---
    "is_camel_case",
    "translate_name",
    #
    # --- Platform / Storage ---
    "default_cache_path",
    "detect_platform",
    "get_backend",
    "get_persistent_data_store",
    "get_temporary_data_store",
    #
    # --- CLI ---
    "main",
    #
    # --- Constants / Metadata / Runtime ---
    "DEFAULT_CACHE_FILENAME",
    "DEFAULT_LOG_LEVEL",
    "EVENT_CACHE_READ",
    "EVENT_CACHE_WRITE",
    "FLUSH_SIGNALS",
    "PROGRAM_DISPLAY",
    "PROGRAM_ENV",
    "PROGRAM_PACKAGE",
    "PROGRAM_SCRIPT",
    "VERSION",
    "current_runtime",
    #
    # --- Logging ---
    "LEVEL_ORDER",
    "get_logger",
    "set_log_level",
    #
    # --- Errors ---
    "InvalidArgumentError",
    "IronyError",
    "PersistenceUnavailableError",
    "SerializationError",
    #
    # --- Types ---
    "Backend",
    "Binding",
    "BrowserBackend",
    "CacheBinding",
    "CacheEvent",
    "CacheStore",
    "EnvironmentBinding",
    "MemoryStorage",
    "NativeBackend",
    "PlatformName",
    "Scope",
]
