# tests/utils/__init__.py

from .backends import RecordingListener, make_native_backend
from .trace import TRACE, make_trace

__all__ = [
    "TRACE",
    "RecordingListener",
    "make_native_backend",
    "make_trace",
]
