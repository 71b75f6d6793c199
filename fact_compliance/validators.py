"""
Structural validators and advisory lints.

Structural validators answer one question about a normalized value: does it
have the shape a value of this kind must have? The checkers use them as
gates in their decision pipelines.

Advisory lints run on a single raw fact and return AdvisoryFinding objects
(empty = nothing to report). They never change a verdict; the orchestrator
reports them next to the verdicts.
"""

from __future__ import annotations

import re

from .extractors import extract_postal_code, parse_weekly_schedule
from .models import AdvisoryFinding, FactKind, Severity
from .normalizers import normalize_address, normalize_opening_hours, normalize_phone

# ─── Constants ───────────────────────────────────────────────────────

SHOPPING_CENTRE_MARKERS: tuple[str, ...] = ("centre", "center", "mall")

PHONE_MIN_DIGITS = 8
PHONE_MAX_DIGITS = 15
MOBILE_PREFIXES: tuple[str, ...] = ("06", "07", "15", "16", "17")

EARLIEST_REASONABLE_HOUR = 6
LATEST_REASONABLE_HOUR = 23

_HAS_DIGIT = re.compile(r"\d")
# Street name + number + locality, or number + street + postcode.
_ADDRESS_SHAPE = re.compile(r"[a-z]+.*\d+.*[a-z]+|\d+.*[a-z]+.*\d+")
_TIME_RANGE = re.compile(r"\d{1,2}[h:]\d{2}-\d{1,2}[h:]\d{2}")
_MOBILE_NUMBER = re.compile(r"(?:" + "|".join(MOBILE_PREFIXES) + r")\d+")


# ─── Structural Validators ───────────────────────────────────────────


def has_required_address_components(address: str) -> bool:
    """A normalized address needs a number and letters on both sides of it."""
    return bool(_HAS_DIGIT.search(address)) and bool(_ADDRESS_SHAPE.search(address))


def has_shopping_centre(address: str) -> bool:
    return any(marker in address for marker in SHOPPING_CENTRE_MARKERS)


def is_valid_phone_length(digits: str) -> bool:
    return PHONE_MIN_DIGITS <= len(digits) <= PHONE_MAX_DIGITS


def is_mobile_number(digits: str) -> bool:
    return bool(_MOBILE_NUMBER.search(digits))


def is_valid_time_range(value: str) -> bool:
    """'9h00-18h00' or '9:00-18:00'."""
    return bool(_TIME_RANGE.fullmatch(value))


def is_reasonable_time_range(value: str) -> bool:
    """Opening before closing, both within 6h–23h."""
    parts = value.split("-")
    if len(parts) != 2:
        return False
    opening = _leading_hour(parts[0])
    closing = _leading_hour(parts[1])
    if opening is None or closing is None:
        return False
    return (
        EARLIEST_REASONABLE_HOUR <= opening <= LATEST_REASONABLE_HOUR
        and EARLIEST_REASONABLE_HOUR <= closing <= LATEST_REASONABLE_HOUR
        and opening < closing
    )


def _leading_hour(time: str) -> int | None:
    match = re.match(r"\s*(\d{1,2})", time)
    return int(match.group(1)) if match else None


# ─── Advisory Lints ──────────────────────────────────────────────────


def lint_address(raw: str | None) -> list[AdvisoryFinding]:
    """Flag addresses without a recognizable 5-digit postal code."""
    findings: list[AdvisoryFinding] = []
    if raw is None or not raw.strip():
        return findings

    if extract_postal_code(normalize_address(raw)) is None:
        findings.append(
            AdvisoryFinding(
                severity=Severity.INFO,
                code="POSTAL_CODE_NOT_FOUND",
                fact_kind=FactKind.ADDRESS,
                message=f"No 5-digit postal code found in address '{raw.strip()}'.",
                details={"address": raw.strip()},
            )
        )

    return findings


def lint_phone_number(raw: str | None) -> list[AdvisoryFinding]:
    """Flag implausible digit counts and numbers that look like mobiles."""
    findings: list[AdvisoryFinding] = []
    if raw is None or not raw.strip():
        return findings

    digits = normalize_phone(raw)

    if not is_valid_phone_length(digits):
        findings.append(
            AdvisoryFinding(
                severity=Severity.WARNING,
                code="PHONE_LENGTH_UNUSUAL",
                fact_kind=FactKind.PHONE,
                message=(
                    f"Phone number '{raw.strip()}' has {len(digits)} digit(s); "
                    f"expected between {PHONE_MIN_DIGITS} and {PHONE_MAX_DIGITS}."
                ),
                details={"digits": digits, "digit_count": len(digits)},
            )
        )

    if is_mobile_number(digits):
        findings.append(
            AdvisoryFinding(
                severity=Severity.INFO,
                code="PHONE_LOOKS_MOBILE",
                fact_kind=FactKind.PHONE,
                message=f"Phone number '{raw.strip()}' looks like a mobile number.",
                details={"digits": digits},
            )
        )

    return findings


def lint_opening_hours(raw: str | None) -> list[AdvisoryFinding]:
    """Flag day slots whose hours are oddly formatted or implausible."""
    findings: list[AdvisoryFinding] = []
    if raw is None or not raw.strip():
        return findings

    schedule = parse_weekly_schedule(normalize_opening_hours(raw))

    for day, value in schedule.items():
        if value is None or schedule.is_closed(day):
            continue

        if not is_valid_time_range(value):
            findings.append(
                AdvisoryFinding(
                    severity=Severity.INFO,
                    code="HOURS_FORMAT_UNUSUAL",
                    fact_kind=FactKind.OPENING_HOURS,
                    message=f"Hours for {day} ('{value}') are not in HHhMM-HHhMM form.",
                    details={"day": day, "value": value},
                )
            )
        elif not is_reasonable_time_range(value):
            findings.append(
                AdvisoryFinding(
                    severity=Severity.WARNING,
                    code="HOURS_UNREASONABLE",
                    fact_kind=FactKind.OPENING_HOURS,
                    message=(
                        f"Hours for {day} ('{value}') fall outside "
                        f"{EARLIEST_REASONABLE_HOUR}h-{LATEST_REASONABLE_HOUR}h "
                        f"or close before they open."
                    ),
                    details={"day": day, "value": value},
                )
            )

    return findings
