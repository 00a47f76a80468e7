"""
Text Conversion

Every configuration value crosses this module on its way into or out of a
parameter list. Numbers, booleans and enumeration values are rendered by
`to_string` and parsed back by `from_string`, so all components agree on a
single textual form.
"""

from functools import singledispatch
from typing import Any, Callable, Dict, Tuple

import numpy as np

_TRUE_WORDS = {"yes", "true", "on", "1"}
_FALSE_WORDS = {"no", "false", "off", "0"}

# Parsers keyed by target type; each returns (value, ok)
_PARSERS: Dict[type, Callable[[str], Tuple[Any, bool]]] = {}


def pad(text: str, width: int = 0, fill: str = " ", left: bool = False) -> str:
    """
    Pad text to a fixed field width.

    Args:
        text: Text to pad.
        width: Minimum field width. Longer text is never truncated.
        fill: Single pad character.
        left: Left-align the text (pad on the right) when True.

    Returns:
        str: The padded text.
    """
    if len(fill) != 1:
        raise ValueError(f"Pad character must be a single character, got {fill!r}")
    if left:
        return text.ljust(width, fill)
    return text.rjust(width, fill)


@singledispatch
def _format(value) -> str:
    return str(value)


@_format.register(str)
def _(value: str) -> str:
    return value


@_format.register(type(None))
def _(value) -> str:
    return ""


@_format.register(bool)
@_format.register(np.bool_)
def _(value) -> str:
    return "Yes" if value else "No"


@_format.register(int)
@_format.register(np.integer)
def _(value) -> str:
    return str(int(value))


@_format.register(float)
@_format.register(np.floating)
def _(value) -> str:
    return np.format_float_positional(value, trim="-")


def to_string(value: Any, width: int = 0, fill: str = " ", left: bool = False) -> str:
    """
    Convert a value to its configuration text.

    Args:
        value: Value to convert.
        width: Minimum field width of the result.
        fill: Pad character used to reach `width`.
        left: Left-align within the field instead of right-align.

    Returns:
        str: Text representation of the value.
    """
    return pad(_format(value), width, fill, left)


def register_formatter(cls: type):
    """Decorator registering a text formatter for values of `cls`."""
    return _format.register(cls)


def register_parser(cls: type):
    """Decorator registering a text parser returning (value, ok) for `cls`."""

    def decorator(func):
        _PARSERS[cls] = func
        return func

    return decorator


@register_parser(str)
def _parse_str(text: str) -> Tuple[str, bool]:
    return text, True


@register_parser(bool)
def _parse_bool(text: str) -> Tuple[Any, bool]:
    word = text.strip().lower()
    if word in _TRUE_WORDS:
        return True, True
    if word in _FALSE_WORDS:
        return False, True
    return None, False


@register_parser(int)
def _parse_int(text: str) -> Tuple[Any, bool]:
    try:
        return int(text.strip()), True
    except ValueError:
        return None, False


@register_parser(float)
def _parse_float(text: str) -> Tuple[Any, bool]:
    try:
        return float(text.strip()), True
    except ValueError:
        return None, False


def from_string(text: str, cls: type) -> Tuple[Any, bool]:
    """
    Parse configuration text into a value of the given type.

    Args:
        text: Text to parse.
        cls: Target type. Must have a registered parser.

    Returns:
        Tuple[Any, bool]: (value, True) on success, (None, False) if the text
        cannot be parsed. Parsers for enumerations may return a sentinel
        value instead of None.

    Raises:
        TypeError: If no parser is registered for `cls`.
    """
    for base in cls.__mro__:
        parser = _PARSERS.get(base)
        if parser is not None:
            return parser(text)
    raise TypeError(f"No text parser registered for type {cls.__name__}")
