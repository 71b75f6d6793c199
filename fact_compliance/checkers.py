"""
Compliance checkers — the public entry points of the engine.

Each checker composes Normalizer → Structural validator → Comparator into an
ordered decision pipeline; the first rule that fires decides the verdict.

Contract shared by all three (FactComplianceChecker):
  - Takes the brand value and the retailer value, either may be None/blank
  - Returns a fresh, immutable ComplianceVerdict
  - Never raises, never touches shared state, never performs I/O
"""

from __future__ import annotations

import logging
from typing import Optional, Protocol

from .comparators import (
    compare_schedules,
    contains_same_information,
    has_matching_postal_code,
    has_shopping_centre_mismatch,
    has_street_name_mismatch,
    is_format_difference,
    numbers_match_without_country_code,
    token_overlap_ratio,
)
from .exceptions import UnknownFactKindError
from .extractors import parse_weekly_schedule
from .models import ComplianceVerdict, FactKind, ReasonCode
from .normalizers import normalize_address, normalize_opening_hours, normalize_phone
from .validators import has_required_address_components

logger = logging.getLogger(__name__)


# ─── Shared Capability ───────────────────────────────────────────────


class FactComplianceChecker(Protocol):
    """Anything that can judge one fact kind across two sources."""

    fact_kind: FactKind

    def check(self, brand: Optional[str], retailer: Optional[str]) -> ComplianceVerdict: ...


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def _verdict(
    kind: FactKind, compliant: bool, reason: ReasonCode, message: str, **details: object
) -> ComplianceVerdict:
    if compliant:
        logger.info("COMPLIANT [%s] %s: %s", kind.value, reason.value, message)
    else:
        logger.info("NOT COMPLIANT [%s] %s: %s", kind.value, reason.value, message)
    return ComplianceVerdict(
        fact_kind=kind,
        is_compliant=compliant,
        reason_code=reason,
        message=message,
        details=details,
    )


# ─── Address ─────────────────────────────────────────────────────────


class AddressComplianceChecker:
    """Same address despite case, spacing, line breaks, punctuation and straße."""

    fact_kind = FactKind.ADDRESS

    def check(self, brand: Optional[str], retailer: Optional[str]) -> ComplianceVerdict:
        kind = self.fact_kind
        logger.debug("Brand address: %r", brand)
        logger.debug("Retailer address: %r", retailer)

        if _is_blank(brand) or _is_blank(retailer):
            return _verdict(kind, False, ReasonCode.MISSING_INFO, "Address is missing on at least one page.")
        assert brand is not None and retailer is not None

        normalized_brand = normalize_address(brand)
        normalized_retailer = normalize_address(retailer)

        if normalized_brand == normalized_retailer:
            return _verdict(kind, True, ReasonCode.EXACT_MATCH, "Addresses match exactly.")

        ratio = round(token_overlap_ratio(normalized_brand, normalized_retailer), 4)

        if contains_same_information(normalized_brand, normalized_retailer) and is_format_difference(
            brand, retailer
        ):
            return _verdict(
                kind,
                True,
                ReasonCode.FORMAT_DIFFERENCE_ONLY,
                "Addresses match with different formatting.",
                overlap_ratio=ratio,
            )

        if not has_required_address_components(normalized_retailer):
            return _verdict(
                kind,
                False,
                ReasonCode.MISSING_COMPONENTS,
                "Essential address components (street, number, locality) are missing.",
                overlap_ratio=ratio,
            )

        if has_street_name_mismatch(normalized_brand, normalized_retailer):
            return _verdict(
                kind, False, ReasonCode.STREET_MISMATCH, "Street name mismatch detected.", overlap_ratio=ratio
            )

        if not has_matching_postal_code(normalized_brand, normalized_retailer):
            return _verdict(
                kind,
                False,
                ReasonCode.POSTAL_CODE_MISMATCH,
                "Postal code mismatch or missing.",
                overlap_ratio=ratio,
            )

        if has_shopping_centre_mismatch(normalized_brand, normalized_retailer):
            return _verdict(
                kind,
                False,
                ReasonCode.SHOPPING_CENTRE_MISMATCH,
                "Shopping centre named on only one page.",
                overlap_ratio=ratio,
            )

        return _verdict(
            kind,
            False,
            ReasonCode.GENERIC_MISMATCH,
            "Address information does not match.",
            overlap_ratio=ratio,
        )


# ─── Phone ───────────────────────────────────────────────────────────


class PhoneComplianceChecker:
    """Same phone number despite separators and an international prefix."""

    fact_kind = FactKind.PHONE

    def check(self, brand: Optional[str], retailer: Optional[str]) -> ComplianceVerdict:
        kind = self.fact_kind
        logger.debug("Brand phone number: %r", brand)
        logger.debug("Retailer phone number: %r", retailer)

        if _is_blank(brand) or _is_blank(retailer):
            return _verdict(
                kind, False, ReasonCode.MISSING_INFO, "Phone number is missing on at least one page."
            )
        assert brand is not None and retailer is not None

        digits_brand = normalize_phone(brand)
        digits_retailer = normalize_phone(retailer)

        if digits_brand == digits_retailer:
            return _verdict(kind, True, ReasonCode.EXACT_MATCH, "Phone numbers match exactly.")

        if numbers_match_without_country_code(digits_brand, digits_retailer):
            return _verdict(
                kind,
                True,
                ReasonCode.COUNTRY_CODE_DIFFERENCE,
                "Phone numbers match (country code difference only).",
            )

        return _verdict(kind, False, ReasonCode.NUMBER_MISMATCH, "Different phone numbers detected.")


# ─── Opening Hours ───────────────────────────────────────────────────


class OpeningHoursComplianceChecker:
    """Same weekly hours, tolerating closed days that one page leaves out."""

    fact_kind = FactKind.OPENING_HOURS

    def check(self, brand: Optional[str], retailer: Optional[str]) -> ComplianceVerdict:
        kind = self.fact_kind
        logger.debug("Brand opening hours: %r", brand)
        logger.debug("Retailer opening hours: %r", retailer)

        if _is_blank(brand) or _is_blank(retailer):
            return _verdict(
                kind, False, ReasonCode.MISSING_INFO, "Opening hours are missing on at least one page."
            )
        assert brand is not None and retailer is not None

        normalized_brand = normalize_opening_hours(brand)
        normalized_retailer = normalize_opening_hours(retailer)

        if normalized_brand == normalized_retailer:
            return _verdict(kind, True, ReasonCode.EXACT_MATCH, "Opening hours match exactly.")

        comparison = compare_schedules(
            parse_weekly_schedule(normalized_brand),
            parse_weekly_schedule(normalized_retailer),
        )
        details = {
            "compared_days": comparison.compared_days,
            "skipped_days": comparison.skipped_days,
            "differing_days": comparison.differing_days,
            "one_sided_days": comparison.one_sided_days,
        }

        if comparison.matches:
            if not comparison.has_comparable_days:
                # Vacuously compliant; kept distinct so it can be reviewed.
                return _verdict(
                    kind,
                    True,
                    ReasonCode.NO_COMPARABLE_DAYS,
                    "No day has hours on both pages; nothing contradicts.",
                    **details,
                )
            return _verdict(
                kind,
                True,
                ReasonCode.CLOSING_DAYS_OMITTED,
                "Opening hours match (closed days reported on one page only).",
                **details,
            )

        if comparison.differing_days:
            return _verdict(
                kind,
                False,
                ReasonCode.DAY_HOURS_MISMATCH,
                f"Different opening hours on: {', '.join(comparison.differing_days)}.",
                **details,
            )

        return _verdict(
            kind,
            False,
            ReasonCode.GENERIC_MISMATCH,
            "Opening hours do not match.",
            **details,
        )


# ─── Registry & Function API ─────────────────────────────────────────

CHECKERS: dict[FactKind, FactComplianceChecker] = {
    FactKind.ADDRESS: AddressComplianceChecker(),
    FactKind.PHONE: PhoneComplianceChecker(),
    FactKind.OPENING_HOURS: OpeningHoursComplianceChecker(),
}


def get_checker(kind: FactKind | str) -> FactComplianceChecker:
    """Look up the checker for a fact kind (enum or its string value)."""
    try:
        return CHECKERS[FactKind(kind)]
    except ValueError:
        raise UnknownFactKindError(
            f"No compliance checker for fact kind '{kind}'.",
            details={"fact_kind": str(kind), "known": [k.value for k in FactKind]},
        ) from None


def check_fact(kind: FactKind | str, brand: Optional[str], retailer: Optional[str]) -> ComplianceVerdict:
    return get_checker(kind).check(brand, retailer)


def check_address(brand: Optional[str], retailer: Optional[str]) -> ComplianceVerdict:
    return CHECKERS[FactKind.ADDRESS].check(brand, retailer)


def check_phone(brand: Optional[str], retailer: Optional[str]) -> ComplianceVerdict:
    return CHECKERS[FactKind.PHONE].check(brand, retailer)


def check_opening_hours(brand: Optional[str], retailer: Optional[str]) -> ComplianceVerdict:
    return CHECKERS[FactKind.OPENING_HOURS].check(brand, retailer)


def is_address_compliant(brand: Optional[str], retailer: Optional[str]) -> bool:
    return check_address(brand, retailer).is_compliant


def is_phone_number_compliant(brand: Optional[str], retailer: Optional[str]) -> bool:
    return check_phone(brand, retailer).is_compliant


def is_opening_hours_compliant(brand: Optional[str], retailer: Optional[str]) -> bool:
    return check_opening_hours(brand, retailer).is_compliant
