# src/variable_irony/names.py
"""Translate variable names into environment variable keys.

    ldLibraryPath    → LD_LIBRARY_PATH
    ld_library_path  → LD_LIBRARY_PATH
    test             → TEST
"""

import re

from .errors import InvalidArgumentError

# a lowercase/digit run followed by zero or more Capitalized segments
CAMEL_CASE_PATTERN = re.compile(r"[\da-z]+(?:[A-Z][\da-z]+)*")
_CAPITAL = re.compile(r"([A-Z])")


def _require_name(value: object, argument: str) -> str:
    if not isinstance(value, str):
        xmsg = f"{argument!r} argument must be a string, not {type(value).__name__!r}"
        raise InvalidArgumentError(xmsg)
    if not value:
        xmsg = f"{argument!r} argument cannot be empty."
        raise InvalidArgumentError(xmsg)
    return value


def is_camel_case(name: str) -> bool:
    return CAMEL_CASE_PATTERN.fullmatch(name) is not None


def translate_name(name: str, real_name: str | None = None) -> str:
    """Return the environment variable key for `name`.

    An explicit `real_name` is used verbatim. Otherwise camelCase names
    get an underscore before each capital, and everything is upper-cased.

    Raises:
        InvalidArgumentError if `name` is empty or not a string, or if
        `real_name` is given but empty.

    """
    _require_name(name, "name")

    if real_name is not None:
        return _require_name(real_name, "real_name")

    if is_camel_case(name):
        return _CAPITAL.sub(r"_\1", name).upper()

    return name.upper()
