"""
Small regex-based parsers over normalized facts.

Every function here is pure and returns an optional or empty value instead of
raising. "Not found" is a legitimate answer; the checkers turn it into a
reason code.
"""

from __future__ import annotations

import re
from typing import Optional

from .models import CLOSED, DAYS_OF_WEEK, WeeklySchedule

# ─── Address Parsing ─────────────────────────────────────────────────

_TOKEN_SEPARATORS = re.compile(r"[,\s]+")
_POSTAL_CODE = re.compile(r"\b\d{5}\b")


def tokenize_address(address: str) -> list[str]:
    """Split on commas and whitespace, dropping empty tokens."""
    return [token for token in _TOKEN_SEPARATORS.split(address) if token]


def extract_street_segment(address: str) -> str:
    """Everything before the first comma: '12 main st, city' -> '12 main st'."""
    return address.split(",", 1)[0].strip()


def extract_postal_code(address: str) -> Optional[str]:
    """First standalone 5-digit token, or None."""
    match = _POSTAL_CODE.search(address)
    return match.group() if match else None


# ─── Phone Parsing ───────────────────────────────────────────────────

LOCAL_NUMBER_MAX_DIGITS = 8
INTERNATIONAL_PREFIX = "00"
COUNTRY_CODE_DIGITS = 3


def extract_local_number(digits: str) -> str:
    """Drop an assumed country code from a digits-only phone number.

    Fixed heuristic: above 8 digits, a leading '00' is dropped and then three
    more digits; without '00' the first three digits are dropped. Shorter
    numbers are already local. This is NOT a country-code table.
    """
    if len(digits) <= LOCAL_NUMBER_MAX_DIGITS:
        return digits
    if digits.startswith(INTERNATIONAL_PREFIX):
        digits = digits[len(INTERNATIONAL_PREFIX):]
    return digits[COUNTRY_CODE_DIGITS:]


# ─── Opening Hours Parsing ───────────────────────────────────────────

_BEFORE_HOURS = re.compile(r"^.*?(?=\d|" + CLOSED + ")")


def extract_hours_from_line(line: str) -> str:
    """Strip the day label: 'monday 9h00-18h00' -> '9h00-18h00'.

    Everything up to the first digit or 'closed' is removed. A line with
    neither is returned whole (trimmed).
    """
    return _BEFORE_HOURS.sub("", line.strip(), count=1).strip()


def extract_day_hours(hours: str, day: str) -> Optional[str]:
    """Hours for one canonical day, or None when no line mentions it.

    When several lines mention the day, the last one wins.
    """
    value: Optional[str] = None
    for line in hours.split("\n"):
        if day in line:
            value = extract_hours_from_line(line)
    return value


def parse_weekly_schedule(hours: str) -> WeeklySchedule:
    """Parse a normalized opening-hours block into seven day slots."""
    return WeeklySchedule(**{day: extract_day_hours(hours, day) for day in DAYS_OF_WEEK})
