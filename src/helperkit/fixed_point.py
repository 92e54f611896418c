"""Fixed-point conversion between decimal amounts and scaled integers.

Floats are scaled through their shortest decimal representation, so
``to_integer(0.29, 2)`` is ``29`` rather than the ``28`` binary arithmetic
would give. As a result ``to_integer(to_float(x, p), p) == x`` holds for any
integer with up to 15 significant digits. The reverse composition truncates
digits beyond `p`.
"""

from __future__ import annotations

from decimal import Decimal, localcontext

from helperkit.errors import InvalidArgumentError

__all__ = ["to_float", "to_integer"]


def to_integer(value: int | float | Decimal | str, precision: int = 2) -> int:
    """Scale `value` by ``10**precision`` and truncate toward zero.

    Args:
        value: Number, or a numeric string.
        precision: Number of decimal places to keep.

    Returns:
        The scaled integer.

    Raises:
        InvalidArgumentError: If `value` is not a finite number.

    Example:
        >>> to_integer(12.3456, 2)
        1234
    """
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value).strip())
        # wide enough that scaling never rounds the coefficient
        with localcontext(prec=len(amount.as_tuple().digits) + max(precision, 0) + 1):
            return int(amount.scaleb(precision))
    except (ArithmeticError, ValueError) as e:
        raise InvalidArgumentError(f"Not a finite number: {value!r}") from e


def to_float(value: int, precision: int = 2) -> float:
    """Divide `value` by ``10**precision``.

    Example:
        >>> to_float(1234, 2)
        12.34
    """
    return value / 10**precision
