"""
Field normalizers for legacy registry encodings

The registry sources store dates as raw digit strings (in two different
orders), training schedules as concatenated digits, numeric codes without
padding and geographic descriptions with administrative prefixes. These
helpers turn them into the display forms the front end expects.
"""

import re
from typing import Any, Optional

NO_DEFINIDO = "NO DEFINIDO"

# Matched against the upper-cased description in this order; only the first
# match is stripped. Within each family the longer alias comes first.
GEO_PREFIXES = (
    "ESTADO", "EDO.", "EDO",
    "MUNICIPIO", "MUN.", "MUN", "MP.", "MP",
    "PARROQUIA", "PAR.", "PAR", "PQ.", "PQ",
)

_SEPARATOR_NOISE = re.compile(r"/|\s{2,}")
_DASH_RUN = re.compile(r"-{2,}")
_GEO_LEADING_PUNCT = "-—:"


def _valid_month_day(month: int, day: int) -> bool:
    return 1 <= month <= 12 and 1 <= day <= 31


def _from_separated(value: str) -> Optional[str]:
    collapsed = _DASH_RUN.sub("-", _SEPARATOR_NOISE.sub("-", value)).strip("-")
    parts = collapsed.split("-")
    if len(parts) != 3:
        return None

    year, month, day = (p.strip() for p in parts)
    if not all(p.isascii() and p.isdigit() for p in (year, month, day)):
        return None
    if len(year) != 4:
        return None
    month_num, day_num = int(month), int(day)

    if not _valid_month_day(month_num, day_num):
        return None
    return f"{year}-{month_num:02d}-{day_num:02d}"


def _from_compact(digits: str) -> Optional[str]:
    month_num, day_num = int(digits[4:6]), int(digits[6:8])
    if not _valid_month_day(month_num, day_num):
        return None
    return f"{digits[0:4]}-{month_num:02d}-{day_num:02d}"


def normalize_calendar_date(raw: Optional[str]) -> Optional[str]:
    """
    Normalize a loosely formatted calendar date to YYYY-MM-DD.

    Tries, in order:
        1. YYYY-M-D with '-', '/', doubled dashes or doubled spaces as separators
        2. exactly eight ASCII digits, YYYYMMDD
        3. the first eight digits anywhere in the string, read as YYYYMMDD

    Args:
        raw: Raw date text

    Returns:
        Zero-padded 'YYYY-MM-DD', or None if no form parses or month/day
        are out of range

    Examples:
        normalize_calendar_date('1999/5/12')   -> '1999-05-12'
        normalize_calendar_date('19990512')    -> '1999-05-12'
        normalize_calendar_date('F:19990512X') -> '1999-05-12'
    """
    if raw is None:
        return None
    value = str(raw).strip()
    if not value:
        return None

    separated = _from_separated(value)
    if separated:
        return separated

    if len(value) == 8 and value.isascii() and value.isdigit():
        return _from_compact(value)

    digits = "".join(ch for ch in value if ch.isascii() and ch.isdigit())
    if len(digits) >= 8:
        return _from_compact(digits[:8])

    return None


def decode_legacy_date(raw: Optional[str]) -> Optional[str]:
    """YYYYMMDD (first 8 characters) -> YYYY-MM-DD, without range checks."""
    if raw is None or len(raw) < 8:
        return None
    return f"{raw[0:4]}-{raw[4:6]}-{raw[6:8]}"


def decode_european_date(raw: Optional[str]) -> Optional[str]:
    """DDMMYYYY (first 8 characters) -> DD-MM-YYYY."""
    if raw is None or len(raw) < 8:
        return None
    return f"{raw[0:2]}-{raw[2:4]}-{raw[4:8]}"


def truncate_event_date(raw: Any) -> Optional[str]:
    """
    Reduce a roll event timestamp to calendar-date precision.

    Digit-only values are decoded as YYYYMMDD; anything else (ISO strings,
    timestamps) keeps its first ten characters.
    """
    if raw is None:
        return None
    value = str(raw).strip()
    if not value:
        return None
    if value[:8].isdigit():
        return decode_legacy_date(value)
    return value[:10]


def format_schedule(raw: Optional[str]) -> Optional[str]:
    """
    Format a concatenated training schedule as 'HH:MM-HH:MM'.

    Twelve or more characters use the legacy wide layout, where each minute
    field is four characters wide and is copied through as given. Eight or
    more characters use plain HHMMHHMM.

    Examples:
        format_schedule('08001200')     -> '08:00-12:00'
        format_schedule('080000001200') -> '08:0000-00:1200'
    """
    if raw is None:
        return None
    value = raw.strip()

    if len(value) >= 12:
        # TODO: confirm the wide layout against a legacy extract before
        # changing these offsets; the minute fields land four digits wide.
        return f"{value[0:2]}:{value[2:6]}-{value[6:8]}:{value[8:12]}"
    if len(value) >= 8:
        return f"{value[0:2]}:{value[2:4]}-{value[4:6]}:{value[6:8]}"
    return None


def pad_fixed_width(n: int, width: int) -> str:
    """
    Zero-pad an integer to `width` characters.

    Negative legacy codes keep their sign inside the width: -5 at width 9
    gives '-00000005'.
    """
    return f"{n:0{width}d}"


def clean_geo_description(description: str) -> str:
    """
    Strip an administrative prefix from a geographic description.

    Only the first matching prefix from GEO_PREFIXES is removed, then any
    leading dash, em dash or colon.

    Examples:
        clean_geo_description('EDO. MIRANDA')   -> 'MIRANDA'
        clean_geo_description('MUN: PLAZA')     -> 'PLAZA'
        clean_geo_description('PQ. - GUARENAS') -> 'GUARENAS'
    """
    text = description.strip()
    upper = text.upper()

    for prefix in GEO_PREFIXES:
        if upper.startswith(prefix):
            text = text[len(prefix):].strip()
            break

    return text.lstrip(_GEO_LEADING_PUNCT).strip()


def format_geo_location(code: int, description: Optional[str]) -> str:
    """Format a geographic level as '<code2> - <description>'."""
    cleaned = clean_geo_description(description) if description is not None else NO_DEFINIDO
    return f"{pad_fixed_width(code, 2)} - {cleaned}"
