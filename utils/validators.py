"""
utils/validators.py
-------------------
Parsing and validation of raw console input.
Every parser raises InvalidInputError with a message fit for the user.
"""

import math
import re
from datetime import date
from typing import Optional

from utils.errors import InvalidInputError

DATE_FORMAT_HINT = "YYYY-MM-DD"

_INT_RE = re.compile(r"^[+-]?\d+$")
_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_int(text: Optional[str], field: str = "value") -> int:
    """Parse a whole number, allowing surrounding whitespace only."""
    cleaned = (text or "").strip()
    if not _INT_RE.match(cleaned):
        raise InvalidInputError(f"{field} must be a whole number.")
    return int(cleaned)


def parse_float(text: Optional[str], field: str = "value") -> float:
    """Parse a finite decimal number."""
    try:
        value = float((text or "").strip())
    except ValueError:
        raise InvalidInputError(f"{field} must be a number.") from None
    if not math.isfinite(value):
        raise InvalidInputError(f"{field} must be a finite number.")
    return value


def parse_price(text: Optional[str]) -> int:
    """Room prices are stored as non-negative whole numbers."""
    value = parse_int(text, "Price")
    if value < 0:
        raise InvalidInputError("Price cannot be negative.")
    return value


def parse_date(text: Optional[str]) -> date:
    """
    Parse a calendar date in strict ``YYYY-MM-DD`` form.

    Impossible dates such as 2024-02-30 are rejected rather than rolled over.
    """
    cleaned = (text or "").strip()
    if not _DATE_RE.match(cleaned):
        raise InvalidInputError(f"Please enter a valid date according to the format ({DATE_FORMAT_HINT}).")
    try:
        return date.fromisoformat(cleaned)
    except ValueError:
        raise InvalidInputError(f"{cleaned} is not a valid calendar date.") from None


def parse_optional_date(text: Optional[str]) -> Optional[date]:
    """Like parse_date, but blank input means "no bound"."""
    if not (text or "").strip():
        return None
    return parse_date(text)


def is_valid_date(text: Optional[str]) -> bool:
    try:
        parse_date(text)
    except InvalidInputError:
        return False
    return True


def require_text(text: Optional[str], field: str, max_len: Optional[int] = None) -> str:
    """Trim the input and reject blank or over-long values."""
    cleaned = (text or "").strip()
    if not cleaned:
        raise InvalidInputError(f"{field} cannot be empty.")
    if max_len is not None and len(cleaned) > max_len:
        raise InvalidInputError(f"{field} must be at most {max_len} characters.")
    return cleaned
