from __future__ import annotations

import datetime as dt
import logging
import re
from decimal import Decimal, InvalidOperation

NUM_CLEAN_RE = re.compile(r"[,\s]")  # thousands separators, spaces
_DMY_RE = re.compile(r"^(\d{1,2})/(\d{1,2})/(\d{4})$")


logger = logging.getLogger(__name__)


def to_dec(
    s: str | float | int | Decimal | None, default: Decimal | None = None
) -> Decimal | None:
    """Convert a loosely formatted number to Decimal, returning default on failure.

    Handles:
    - None, "" -> default
    - "-", "--", "N/A" -> default
    - "1,234.56" -> Decimal("1234.56")
    - floats go through str() so 1.11 stays Decimal("1.11")
    """
    if s is None:
        return default
    if isinstance(s, Decimal):
        return s
    if isinstance(s, bool):
        logger.error("Refusing to treat boolean %r as a number; using %s", s, default)
        return default
    if isinstance(s, (int, float)):
        return Decimal(str(s))

    s_stripped = s.strip()
    if not s_stripped or s_stripped in {"-", "--", "N/A", "n/a"}:
        return default

    try:
        return Decimal(NUM_CLEAN_RE.sub("", s_stripped))
    except InvalidOperation:
        logger.error("Failed to parse number from: %r; using %s", s, default)
        return default


def to_dec_strict(s: str | float | int | Decimal | None) -> Decimal:
    """Convert to Decimal, raising ValueError on invalid or missing data."""
    if s is None:
        raise ValueError("Value is None")
    if isinstance(s, Decimal):
        return s
    if isinstance(s, bool):
        raise ValueError(f"Boolean is not a number: {s!r}")
    if isinstance(s, (int, float)):
        return Decimal(str(s))

    s_stripped = s.strip()
    if not s_stripped:
        raise ValueError("Value is empty string")

    if s_stripped in {"-", "--", "N/A", "n/a"}:
        raise ValueError(f"Value is a placeholder: {s_stripped!r}")

    try:
        value = Decimal(NUM_CLEAN_RE.sub("", s_stripped))
    except InvalidOperation as e:
        raise ValueError(f"Invalid decimal format: {s!r}") from e
    if not value.is_finite():
        raise ValueError(f"Non-finite decimal: {s!r}")
    return value


def parse_date(d: str) -> dt.date:
    """Parse 'YYYY-MM-DD' (optionally followed by ', HH:MM:SS') or 'DD/MM/YYYY'."""
    d = d.strip()
    if "," in d:
        d = d.split(",")[0].strip()
    m = _DMY_RE.match(d)
    if m:
        day, month, year = (int(g) for g in m.groups())
        return dt.date(year, month, day)
    return dt.date.fromisoformat(d)


def date_key(d: str | dt.date) -> str:
    """Return YYYY-MM-DD string for a date."""
    if isinstance(d, dt.date):
        return d.isoformat()
    return parse_date(d).isoformat()
