"""Human-readable byte sizes."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, localcontext

from helperkit.errors import InvalidArgumentError

__all__ = ["format_file_size"]

BASE = 1024
UNITS = ("Byte", "KB", "MB")


def format_file_size(size: int | float) -> str:
    """Format a byte count as ``Byte``, ``KB`` or ``MB``.

    Bytes are shown without decimals, KB and MB with two. Rounding is half-up
    and no thousands separator is used.

    Raises:
        InvalidArgumentError: If `size` is NaN or infinite.

    Example:
        >>> format_file_size(1536)
        '1.50 KB'
    """
    amount = Decimal(str(size))
    if not amount.is_finite():
        raise InvalidArgumentError(f"Not a finite size: {size!r}")

    # dividing by 1024**2 adds at most 20 fractional digits
    digits = max(len(amount.as_tuple().digits), amount.adjusted() + 1)
    with localcontext(prec=digits + 20):
        if amount < BASE:
            unit, places = UNITS[0], Decimal("1")
        elif amount < BASE**2:
            unit, places, amount = UNITS[1], Decimal("0.01"), amount / BASE
        else:
            unit, places, amount = UNITS[2], Decimal("0.01"), amount / BASE**2
        return f"{amount.quantize(places, rounding=ROUND_HALF_UP)} {unit}"
