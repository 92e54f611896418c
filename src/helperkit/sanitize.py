"""Sanitizing and validating untrusted input.

`input_filter` performs textual escaping only. It neutralizes the five
HTML-significant characters but is not a context-aware sanitizer: values
placed in attributes, URLs, scripts or CSS need escaping for that context.
"""

from __future__ import annotations

import html
import re
from collections.abc import Mapping, Sequence
from typing import Any

__all__ = ["array_sanitize", "input_filter", "validate_integer"]

WHITESPACE = " \t\n\r\0\x0b"
ESCAPE_PATTERN = re.compile(r"\\(.?)", re.DOTALL)
DIGITS_PATTERN = re.compile(r"[0-9]+")


def _strip_slashes(value: str) -> str:
    """Remove backslash escapes: ``\\x`` -> ``x``, ``\\\\`` -> ``\\``, ``\\0`` -> NUL."""
    return ESCAPE_PATTERN.sub(
        lambda m: "\0" if m.group(1) == "0" else m.group(1), value
    )


def input_filter(value: Any) -> str | None:
    """Normalize and HTML-escape a single input value.

    Steps: single quotes become double quotes, surrounding whitespace is
    trimmed, backslash escapes are removed, then ``& < > " '`` are replaced
    with HTML entities.

    Returns:
        The filtered string, or None when `value` is None.
    """
    if value is None:
        return None

    text = str(value).replace("'", '"').strip(WHITESPACE)
    return html.escape(_strip_slashes(text), quote=True)


def array_sanitize(
    record: Mapping[str, Any], select_keys: Sequence[str] | None = None
) -> dict[str, Any]:
    """Apply `input_filter` to a record's values.

    Args:
        record: Record to sanitize; it is not modified.
        select_keys: When given and non-empty, only these keys (if present
            with a non-None value) are filtered; all others are copied as is.

    Returns:
        A new record with filtered values.
    """
    if not select_keys:
        return {key: input_filter(value) for key, value in record.items()}

    result = dict(record)
    for key in select_keys:
        if record.get(key) is not None:
            result[key] = input_filter(record[key])
    return result


def validate_integer(value: int | str | None) -> bool:
    """True for an ``int`` or a string made only of ASCII digits.

    Signs, decimal points and whitespace make a string invalid. ``bool``,
    ``float`` and ``None`` are rejected.
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, str):
        return DIGITS_PATTERN.fullmatch(value) is not None
    return False
