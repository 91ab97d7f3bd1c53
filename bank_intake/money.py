"""Monetary amounts as two-place Decimals."""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

CENT = Decimal("0.01")
ZERO = Decimal("0.00")


def to_money(value: Decimal | int | float | str) -> Decimal:
    """Convert ``value`` to a Decimal rounded half-up to the cent.

    Raises
    ------
    decimal.InvalidOperation
        ``value`` is not a number, is NaN or infinite, or has too many
        digits to be held to the cent.
    """
    amount = Decimal(str(value))
    if not amount.is_finite():
        raise InvalidOperation(f"Not a finite amount: {value!r}")
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)
