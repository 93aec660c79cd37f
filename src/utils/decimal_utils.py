"""Helpers for Decimal normalization."""

from decimal import Decimal, InvalidOperation


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from a store, the importer, or a caller.

    Returns:
        Decimal: Normalized numeric value. Missing, unparseable and
        non-finite values (NaN, Infinity) become zero.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation:
            return Decimal("0")
    if not result.is_finite():
        return Decimal("0")
    return result


def coerce_optional_decimal(value) -> Decimal | None:
    """Normalize a numeric value while keeping None as None."""
    if value is None or value == "":
        return None
    return coerce_decimal(value)


def coerce_int(value) -> int:
    """Normalize an ordinal such as ``3``, ``"2.0"`` or ``None`` to int.

    Fractions are truncated; anything unparseable becomes zero.
    """
    return int(coerce_decimal(value))


__all__ = ["coerce_decimal", "coerce_optional_decimal", "coerce_int"]
