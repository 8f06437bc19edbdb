"""Helpers for Decimal normalization."""

from decimal import Decimal, InvalidOperation


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value decoded from ledger JSON.

    Returns:
        Decimal: Normalized numeric value.

    Raises:
        ValueError: If the value is not numeric.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise ValueError(f"Not a numeric value: {value!r}")
    try:
        return Decimal(str(value))
    except InvalidOperation as exc:
        raise ValueError(f"Not a numeric value: {value!r}") from exc


def decimal_from_mantissa(mantissa: int, places: int) -> Decimal:
    """Build an exact Decimal from an integer mantissa and decimal places.

    Args:
        mantissa: Integer digits of the quantity.
        places: Number of digits after the decimal point.

    Returns:
        Decimal: ``mantissa / 10**places`` without float rounding.
    """
    return Decimal(int(mantissa)).scaleb(-int(places))


__all__ = ["coerce_decimal", "decimal_from_mantissa"]
