"""
Deterministic normalizers, one per fact kind.

Each normalizer is a pure, idempotent string transform:
    normalize(normalize(x)) == normalize(x)

Callers are responsible for the None / blank check; normalizers assume text.
"""

from __future__ import annotations

import re

# ─── Address ─────────────────────────────────────────────────────────

_WHITESPACE = re.compile(r"\s+")


def normalize_address(raw: str) -> str:
    """Lower-case, collapse whitespace (line breaks included), unify straße."""
    text = raw.lower()
    text = _WHITESPACE.sub(" ", text)
    text = text.replace("straße", "strasse")
    return text.strip()


# ─── Phone ───────────────────────────────────────────────────────────

_NON_DIGIT = re.compile(r"\D")


def normalize_phone(raw: str) -> str:
    """Keep digits only: '+33 1 42 68 53 00' -> '33142685300'."""
    return _NON_DIGIT.sub("", raw)


# ─── Opening Hours ───────────────────────────────────────────────────

# Longest alternative first so "tues" is not consumed as "tue" + "s".
_DAY_ALIASES: dict[str, tuple[str, ...]] = {
    "monday": ("monday", "mon"),
    "tuesday": ("tuesday", "tues", "tue"),
    "wednesday": ("wednesday", "weds", "wed"),
    "thursday": ("thursday", "thurs", "thur", "thu"),
    "friday": ("friday", "fri"),
    "saturday": ("saturday", "sat"),
    "sunday": ("sunday", "sun"),
}

_DAY_PATTERNS: list[tuple[re.Pattern[str], str]] = [
    (re.compile(r"\b(?:" + "|".join(aliases) + r")\b"), day)
    for day, aliases in _DAY_ALIASES.items()
]

_CLOSED_SYNONYMS = re.compile(r"\b(?:fermé|ferme|geschlossen)\b")
_TIME_SEPARATOR = re.compile(r"[:.,](?=\d)")
_MERIDIEM = re.compile(r"(?<![a-z])(?:am|pm)(?![a-z])")
_HOUR_LEADING_ZERO = re.compile(r"\b0(\d)(?=h)")
_RANGE_DASH = re.compile(r"[^\S\n]*[-–—][^\S\n]*")
_HORIZONTAL_WHITESPACE = re.compile(r"[^\S\n]+")


def normalize_opening_hours(raw: str) -> str:
    """Canonical, line-preserving form of an opening-hours block.

    - lower-case
    - am/pm markers dropped
    - ':', '.' or ',' before a digit -> 'h'   (09:00 -> 09h00)
    - day abbreviations -> full English day names
    - French/German closed markers -> 'closed'
    - leading zero of an hour dropped          (09h00 -> 9h00)
    - spaces around range dashes removed       (9h00 - 18h00 -> 9h00-18h00)
    - whitespace collapsed per line, blank lines removed
    """
    text = raw.lower().replace("\r\n", "\n").replace("\r", "\n")
    text = _MERIDIEM.sub("", text)
    text = _TIME_SEPARATOR.sub("h", text)
    for pattern, day in _DAY_PATTERNS:
        text = pattern.sub(day, text)
    text = _CLOSED_SYNONYMS.sub("closed", text)
    text = _HOUR_LEADING_ZERO.sub(r"\1", text)
    text = _RANGE_DASH.sub("-", text)

    lines = (_HORIZONTAL_WHITESPACE.sub(" ", line).strip() for line in text.split("\n"))
    return "\n".join(line for line in lines if line)
