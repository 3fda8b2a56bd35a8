# src/variable_irony/errors.py
"""Exception types raised by variable_irony.

Every error derives from `IronyError` and from the builtin it most
resembles, so callers can catch either.
"""


class IronyError(Exception):
    """Base class for all variable_irony errors."""


class InvalidArgumentError(IronyError, ValueError):
    """A binding call received an empty name, empty override, or bad scope."""


class PersistenceUnavailableError(IronyError, OSError):
    """The cache file or data directory cannot be read or written."""


class SerializationError(IronyError, ValueError):
    """A cached value cannot be encoded as JSON."""
