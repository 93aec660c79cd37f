"""Domain normalization helpers."""

from datetime import date
import re

from src.domain.constants import INITIAL_BALANCE_MARKERS

_WHITESPACE = re.compile(r"\s+")


def normalize_account_name(name: str | None) -> str:
    """Return the join key used to match transaction text to accounts.

    Args:
        name: Raw account or category name.

    Returns:
        str: Lowercased name with all whitespace removed.
    """
    if not name:
        return ""
    return _WHITESPACE.sub("", name.lower())


def normalize_currency_code(code: str | None) -> str | None:
    """Normalize currency codes.

    Args:
        code: Raw currency code from an account or transaction.

    Returns:
        str | None: Uppercased code, or None when empty.
    """
    if not code:
        return None
    cleaned = code.strip()
    return cleaned.upper() if cleaned else None


def parse_iso_date(value: str | None) -> date | None:
    """Parse the calendar date of an ISO date or datetime string.

    Args:
        value: ``YYYY-MM-DD`` string, optionally followed by ``T`` and a
            time component.

    Returns:
        date | None: Parsed calendar date, or None when unparseable.
    """
    if not value:
        return None
    day = value.strip().split("T", 1)[0]
    try:
        return date.fromisoformat(day)
    except ValueError:
        return None


def is_initial_balance_note(note: str | None) -> bool:
    """Return True when a note marks a manually entered opening balance."""
    lowered = (note or "").lower()
    return any(marker in lowered for marker in INITIAL_BALANCE_MARKERS)


__all__ = [
    "normalize_account_name",
    "normalize_currency_code",
    "parse_iso_date",
    "is_initial_balance_note",
]
