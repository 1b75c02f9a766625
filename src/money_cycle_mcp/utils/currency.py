"""
Currency string helpers.

Amounts are held as integer cents. These functions convert between cents,
display strings ("$2,000.56") and whatever a user is typing into an amount
field. None of them raise on malformed text: input that carries no digits
becomes zero or an empty string.
"""

import re
from typing import Optional, Tuple

_NON_NUMERIC = re.compile(r"[^0-9.]")

# int() and str() refuse numbers past a few thousand digits, so long
# amounts are converted in chunks of this size
_CHUNK_DIGITS = 1000
_CHUNK_BASE = 10**_CHUNK_DIGITS


def _split_amount(text: str) -> Tuple[str, Optional[str]]:
    """
    Reduce free text to its integer digits and fraction digits.

    Only the first "." is treated as the decimal point; any later ones are
    dropped and their digits join the fraction. The fraction is cut to two
    digits.

    Returns:
        Tuple of (integer_digits, fraction_digits). fraction_digits is None
        when the text has no decimal point and may be "" for a trailing one.
    """
    clean = _NON_NUMERIC.sub("", text)
    integer, dot, fraction = clean.partition(".")
    if not dot:
        return integer, None
    return integer, fraction.replace(".", "")[:2]


def _digits_to_int(digits: str) -> int:
    value = 0
    for start in range(0, len(digits), _CHUNK_DIGITS):
        chunk = digits[start : start + _CHUNK_DIGITS]
        value = value * 10 ** len(chunk) + int(chunk)
    return value


def _int_to_digits(value: int) -> str:
    if value < _CHUNK_BASE:
        return str(value)
    chunks = []
    while value:
        value, chunk = divmod(value, _CHUNK_BASE)
        chunks.append(f"{chunk:0{_CHUNK_DIGITS}d}")
    return "".join(reversed(chunks)).lstrip("0")


def _render_amount(
    integer_digits: str, fraction: Optional[str], prefix: str = "$"
) -> str:
    """Group the integer part with commas and attach the fraction as given."""
    digits = integer_digits.lstrip("0") or "0"
    head = len(digits) % 3 or 3
    groups = [digits[:head]]
    groups.extend(digits[i : i + 3] for i in range(head, len(digits), 3))
    rendered = prefix + ",".join(groups)
    if fraction is not None:
        rendered += f".{fraction}"
    return rendered


def format_cents(cents: int) -> str:
    """
    Format integer cents as a display string.

    Whole-dollar amounts drop the fractional part.

    Args:
        cents: Amount in cents (e.g., 200056)

    Returns:
        Display string (e.g., "$2,000.56")
    """
    if cents < 0:
        return "-" + format_cents(-cents)
    if cents == 0:
        return "$0"

    dollars, remainder = divmod(cents, 100)
    fraction = f"{remainder:02d}" if remainder else None
    return _render_amount(_int_to_digits(dollars), fraction)


def parse_to_cents(text: str) -> int:
    """
    Convert a currency string to integer cents.

    Fraction digits beyond cents are truncated, not rounded.

    Args:
        text: Currency string (e.g., "$2,000.56")

    Returns:
        Amount in cents (e.g., 200056), or 0 if the text has no digits
    """
    integer, fraction = _split_amount(text)
    if not integer and not fraction:
        return 0

    dollars = _digits_to_int(integer)
    if fraction is None:
        return dollars * 100

    cents = fraction.ljust(2, "0")
    if cents == "00":
        return dollars * 100
    return dollars * 100 + int(cents)


def format_for_display(text: str) -> str:
    """
    Add a dollar sign and thousands separators to a decimal string.

    Purely cosmetic: the fraction is kept as typed (cut to two digits) and
    the value is never rounded, so the output can be fed back in unchanged.

    Args:
        text: Decimal string (e.g., "2000000.5")

    Returns:
        Display string (e.g., "$2,000,000.5"), or "$0" if the text has no digits
    """
    integer, fraction = _split_amount(text)
    if not integer and not fraction:
        return "$0"
    return _render_amount(integer, fraction)


def sanitize_live_input(text: str) -> str:
    """
    Clean an amount field on every keystroke.

    Args:
        text: Raw field contents (e.g., "2000000.567")

    Returns:
        Grouped string without a currency sign (e.g., "2,000,000.56"),
        or "" if the text has no digits
    """
    integer, fraction = _split_amount(text)
    if not integer and not fraction:
        return ""
    return _render_amount(integer, fraction, prefix="")


def strip_formatting(text: str) -> str:
    """
    Remove display formatting so an amount can be edited again.

    Args:
        text: Display string (e.g., "$2,000.567")

    Returns:
        Plain numeric string with at most two decimals (e.g., "2000.56")
    """
    integer, fraction = _split_amount(text)
    if not integer and not fraction:
        return ""
    if fraction is None:
        return integer
    return f"{integer}.{fraction}"


def apply_discount(cents: int, percent: int) -> int:
    """
    Apply a whole-percent discount to a price in cents.

    The result is floored so it never carries fractional cents.
    """
    if not 0 <= percent <= 100:
        raise ValueError(f"Discount must be between 0 and 100, got {percent}")
    return cents * (100 - percent) // 100
