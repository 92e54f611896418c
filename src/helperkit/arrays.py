"""Helpers for validating, reordering and sorting records.

A record is an insertion-ordered mapping of string keys to values (a plain
``dict`` in practice). All helpers return new containers and never mutate
their inputs.
"""

from __future__ import annotations

import functools
from collections.abc import Mapping, Sequence, Sized
from enum import Enum
from numbers import Number
from typing import Any

from helperkit.errors import InvalidArgumentError

__all__ = ["SortOrder", "check_empty", "order_array", "sort_data"]


class SortOrder(str, Enum):
    """Sort directions accepted by `sort_data`."""

    ASC = "ASC"
    DESC = "DESC"


def _is_empty(value: Any) -> bool:
    """Loose emptiness: None, False, zero, "", "0" and empty containers."""
    if value is None or value is False:
        return True
    if isinstance(value, Number):
        return value == 0
    if isinstance(value, str):
        return value in ("", "0")
    if isinstance(value, Sized):
        return len(value) == 0
    return False


def check_empty(
    record: Mapping[str, Any],
    keys: Sequence[str] = (),
    allow_empty: bool = False,
) -> bool:
    """Check that keys are present in a record and, optionally, not empty.

    Args:
        record: The record to inspect.
        keys: Keys to check; when empty every key of `record` is checked.
        allow_empty: Accept empty values (``0``, ``""``, ``[]``...) when True.
            A ``None`` value always counts as missing.

    Returns:
        True if every checked key passes, False otherwise.
    """
    for key in keys or list(record):
        value = record.get(key)
        if value is None:
            return False
        if not allow_empty and _is_empty(value):
            return False
    return True


def order_array(
    record: Mapping[str, Any],
    order: Sequence[str],
    keep_unlisted: bool = False,
) -> dict[str, Any]:
    """Return a copy of `record` with keys arranged as listed in `order`.

    Keys in `order` that are missing from `record` are skipped. With
    `keep_unlisted`, the remaining keys follow in their original order.
    """
    ordered = {key: record[key] for key in order if key in record}
    if keep_unlisted:
        for key, value in record.items():
            ordered.setdefault(key, value)
    return ordered


def _field_value(item: Any, field: str) -> Any:
    if isinstance(item, Mapping):
        return item.get(field)
    return getattr(item, field, None)


def _is_number(value: Any) -> bool:
    return isinstance(value, Number) and not isinstance(value, bool)


def _compare(a: Any, b: Any) -> int:
    if not (_is_number(a) and _is_number(b)):
        a, b = str(a), str(b)
    if a == b:
        return 0
    return -1 if a < b else 1


def sort_data(
    items: Sequence[Any],
    direction: str | SortOrder,
    field: str = "id",
) -> list[Any]:
    """Stable sort of records (or objects) by the value of one field.

    Numbers compare numerically; any other pair of values compares as text.
    Elements with equal values keep their relative order in both directions.

    Args:
        items: Mappings or objects exposing `field` as a key or attribute.
        direction: ``"ASC"`` or ``"DESC"``, case-insensitive.
        field: Name of the field to sort by. It must be set on the first element.

    Returns:
        A new, sorted list.

    Raises:
        InvalidArgumentError: If the direction is unknown, or the field is
            missing from the first element (including an empty `items`).
    """
    try:
        order = SortOrder(str(getattr(direction, "value", direction)).upper())
    except ValueError as e:
        raise InvalidArgumentError("Invalid order type") from e

    if not items or _field_value(items[0], field) is None:
        raise InvalidArgumentError("Invalid key")

    def by_field(a: Any, b: Any) -> int:
        return _compare(_field_value(a, field), _field_value(b, field))

    # sorted() stays stable with reverse=True
    return sorted(
        items,
        key=functools.cmp_to_key(by_field),
        reverse=order is SortOrder.DESC,
    )
