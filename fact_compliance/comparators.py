"""
Equivalence comparators — do two normalized values denote the same fact?

Every comparator is symmetric: compare(a, b) == compare(b, a).
The thresholds below are policy, pinned by tests. Do not tune them.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from .extractors import (
    extract_local_number,
    extract_postal_code,
    extract_street_segment,
    tokenize_address,
)
from .models import DAYS_OF_WEEK, WeeklySchedule
from .validators import has_shopping_centre

# ─── Constants ───────────────────────────────────────────────────────

# Strictly greater than: a ratio of exactly 0.70 does NOT qualify.
TOKEN_OVERLAP_THRESHOLD = 0.70

_NON_ALPHANUMERIC = re.compile(r"[^a-zA-Z0-9]")


# ─── Address ─────────────────────────────────────────────────────────


def _count_matches(tokens: list[str], other: list[str]) -> int:
    lookup = set(other)
    return sum(1 for token in tokens if token in lookup)


def token_overlap_ratio(address1: str, address2: str) -> float:
    """Share of tokens found verbatim on the other side.

    matches / max(len(tokens1), len(tokens2)), with matches counted per token
    (duplicates included) from the side with fewer tokens. On equal token
    counts the smaller of the two directional counts is used.
    """
    tokens1 = tokenize_address(address1)
    tokens2 = tokenize_address(address2)
    longest = max(len(tokens1), len(tokens2))
    if longest == 0:
        return 0.0

    if len(tokens1) < len(tokens2):
        matches = _count_matches(tokens1, tokens2)
    elif len(tokens2) < len(tokens1):
        matches = _count_matches(tokens2, tokens1)
    else:
        matches = min(_count_matches(tokens1, tokens2), _count_matches(tokens2, tokens1))

    return matches / longest


def contains_same_information(address1: str, address2: str) -> bool:
    return token_overlap_ratio(address1, address2) > TOKEN_OVERLAP_THRESHOLD


def is_format_difference(raw1: str, raw2: str) -> bool:
    """Raw strings agree once punctuation, spacing and case are ignored."""
    stripped1 = _NON_ALPHANUMERIC.sub("", raw1)
    stripped2 = _NON_ALPHANUMERIC.sub("", raw2)
    return stripped1.lower() == stripped2.lower()


def has_street_name_mismatch(address1: str, address2: str) -> bool:
    return not contains_same_information(
        extract_street_segment(address1), extract_street_segment(address2)
    )


def has_matching_postal_code(address1: str, address2: str) -> bool:
    postal1 = extract_postal_code(address1)
    postal2 = extract_postal_code(address2)
    return postal1 is not None and postal2 is not None and postal1 == postal2


def has_shopping_centre_mismatch(address1: str, address2: str) -> bool:
    return has_shopping_centre(address1) != has_shopping_centre(address2)


# ─── Phone ───────────────────────────────────────────────────────────


def numbers_match_without_country_code(digits1: str, digits2: str) -> bool:
    return extract_local_number(digits1) == extract_local_number(digits2)


# ─── Opening Hours ───────────────────────────────────────────────────


@dataclass
class ScheduleComparison:
    """Per-day outcome of a closing-day tolerant schedule comparison."""

    compared_days: list[str] = field(default_factory=list)  # Hours on both sides, equal
    skipped_days: list[str] = field(default_factory=list)  # Closed on at least one side
    differing_days: list[str] = field(default_factory=list)  # Hours on both sides, unequal
    one_sided_days: list[str] = field(default_factory=list)  # Hours on one side, unknown on other

    @property
    def matches(self) -> bool:
        return not self.differing_days and not self.one_sided_days

    @property
    def has_comparable_days(self) -> bool:
        return bool(self.compared_days or self.differing_days)


def compare_schedules(schedule1: WeeklySchedule, schedule2: WeeklySchedule) -> ScheduleComparison:
    """Compare two schedules day by day, skipping any day either side closes.

    Days unknown on both sides are equal and are not counted as compared.
    """
    result = ScheduleComparison()

    for day in DAYS_OF_WEEK:
        if schedule1.is_closed(day) or schedule2.is_closed(day):
            result.skipped_days.append(day)
            continue

        value1 = schedule1.get(day)
        value2 = schedule2.get(day)

        if value1 is None and value2 is None:
            continue
        if value1 is None or value2 is None:
            result.one_sided_days.append(day)
        elif value1 == value2:
            result.compared_days.append(day)
        else:
            result.differing_days.append(day)

    return result
