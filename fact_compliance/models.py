"""
Pydantic models for store facts and compliance verdicts.

Every verdict, schedule and report is immutable once built. Checkers create
them fresh per call and never share them across calls.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# ─── Enumerations ────────────────────────────────────────────────────


class FactKind(str, Enum):
    """The three store facts compared between brand and retailer pages."""

    ADDRESS = "address"
    PHONE = "phone"
    OPENING_HOURS = "opening_hours"


class ReasonCode(str, Enum):
    """Machine-readable decision path behind a verdict."""

    MISSING_INFO = "MISSING_INFO"
    EXACT_MATCH = "EXACT_MATCH"

    # Address
    FORMAT_DIFFERENCE_ONLY = "FORMAT_DIFFERENCE_ONLY"
    MISSING_COMPONENTS = "MISSING_COMPONENTS"
    STREET_MISMATCH = "STREET_MISMATCH"
    POSTAL_CODE_MISMATCH = "POSTAL_CODE_MISMATCH"
    SHOPPING_CENTRE_MISMATCH = "SHOPPING_CENTRE_MISMATCH"

    # Phone
    COUNTRY_CODE_DIFFERENCE = "COUNTRY_CODE_DIFFERENCE"
    NUMBER_MISMATCH = "NUMBER_MISMATCH"

    # Opening hours
    CLOSING_DAYS_OMITTED = "CLOSING_DAYS_OMITTED"
    NO_COMPARABLE_DAYS = "NO_COMPARABLE_DAYS"  # Vacuously compliant, see DESIGN.md
    DAY_HOURS_MISMATCH = "DAY_HOURS_MISMATCH"

    GENERIC_MISMATCH = "GENERIC_MISMATCH"


class Severity(str, Enum):
    """Severity of an advisory finding."""

    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"


# ─── Verdict ─────────────────────────────────────────────────────────


class ComplianceVerdict(BaseModel):
    """Outcome of comparing one fact as published on two pages."""

    model_config = ConfigDict(frozen=True)

    fact_kind: FactKind
    is_compliant: bool
    reason_code: ReasonCode
    message: str = ""
    details: dict = Field(default_factory=dict)  # Order-independent values only


# ─── Weekly Schedule ─────────────────────────────────────────────────

DAYS_OF_WEEK: tuple[str, ...] = (
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
)

CLOSED = "closed"


class WeeklySchedule(BaseModel):
    """Hours per canonical day name.

    ``None`` means the day was never mentioned (unknown), which is NOT the
    same as a value containing ``closed``.
    """

    model_config = ConfigDict(frozen=True)

    monday: Optional[str] = None
    tuesday: Optional[str] = None
    wednesday: Optional[str] = None
    thursday: Optional[str] = None
    friday: Optional[str] = None
    saturday: Optional[str] = None
    sunday: Optional[str] = None

    def get(self, day: str) -> Optional[str]:
        if day not in DAYS_OF_WEEK:
            raise KeyError(day)
        return getattr(self, day)

    def items(self) -> list[tuple[str, Optional[str]]]:
        return [(day, getattr(self, day)) for day in DAYS_OF_WEEK]

    def is_closed(self, day: str) -> bool:
        value = self.get(day)
        return value is not None and CLOSED in value

    def is_unknown(self, day: str) -> bool:
        return self.get(day) is None


# ─── Advisory Findings ───────────────────────────────────────────────


class AdvisoryFinding(BaseModel):
    """A lint observation on a single raw fact. Never changes a verdict."""

    severity: Severity
    code: str  # Machine-readable, e.g. "PHONE_LENGTH_UNUSUAL"
    fact_kind: FactKind
    message: str
    details: dict = Field(default_factory=dict)


# ─── Compliance Report ───────────────────────────────────────────────


class ComplianceReport(BaseModel):
    """The final output of the compliance pipeline for one store."""

    store_id: str
    is_compliant: bool
    verdicts: list[ComplianceVerdict] = Field(default_factory=list)
    advisories: list[AdvisoryFinding] = Field(default_factory=list)
    input_hash: str = ""  # SHA-256 of the raw facts for audit trail

    def verdict_for(self, kind: FactKind) -> Optional[ComplianceVerdict]:
        for verdict in self.verdicts:
            if verdict.fact_kind == kind:
                return verdict
        return None
