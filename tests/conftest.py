# tests/conftest.py
"""
Shared test setup for project.

Every test runs with:
- a private cache file location (VARIABLE_IRONY_CACHE_PATH under tmp_path)
- no process-wide backend chosen yet
- no platform override leaking in from the developer's shell
"""

from collections.abc import Generator
from pathlib import Path

import pytest
from pytest import Config, Item as PytestItem

import variable_irony.datastore as mod_datastore
import variable_irony.platform_select as mod_platform
import variable_irony.runtime as mod_runtime
from variable_irony.backend_native import NativeBackend
from variable_irony.meta import PROGRAM_ENV
from variable_irony.scope import Scope
from tests.utils import make_native_backend, make_trace

TRACE = make_trace("⚡️")


@pytest.fixture(autouse=True)
def isolated_runtime(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> Generator[None, None, None]:
    """Keep tests away from the real data store and the shared backend."""
    monkeypatch.setenv(f"{PROGRAM_ENV}_CACHE_PATH", str(tmp_path / "irony-cache.json"))
    monkeypatch.delenv(f"{PROGRAM_ENV}_PLATFORM", raising=False)
    monkeypatch.setattr(mod_platform, "_backend", None)
    monkeypatch.setattr(mod_datastore, "_persistent_stores", {})
    monkeypatch.setattr(mod_datastore, "_temporary_stores", {})
    monkeypatch.setattr(mod_datastore, "_fallback_stores", {})
    monkeypatch.setitem(mod_runtime.current_runtime, "log_level", "info")
    monkeypatch.setitem(mod_runtime.current_runtime, "use_color", False)
    yield
    mod_runtime.current_runtime.pop("platform", None)


@pytest.fixture
def scope() -> Scope:
    return Scope()


@pytest.fixture
def cache_file(tmp_path: Path) -> Path:
    return tmp_path / "data" / "cache.json"


@pytest.fixture
def backend(cache_file: Path) -> NativeBackend:
    """Native backend on the real environment with a private cache file."""
    return make_native_backend(cache_file)


def pytest_collection_modifyitems(
    config: Config,
    items: list[PytestItem],
) -> None:
    """Automatically skip debug tests unless asked for."""
    keywords = config.getoption("-k") or ""
    if "debug" in keywords.lower():
        return  # user explicitly requested them, don't skip

    for item in items:
        if "debug" in item.keywords:
            TRACE("skipping debug test", item.nodeid)
            item.add_marker(
                pytest.mark.skip(reason="Skipped debug test (use -k debug to run)")
            )
