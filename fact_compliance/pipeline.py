"""
Compliance pipeline — checks every fact of one store across two pages.

Flow:
  ┌───────────────┐   ┌─────────────────┐
  │ Brand source  │   │ Retailer source │   ← FactSource.fetch(kind)
  └───────┬───────┘   └────────┬────────┘
          └──────────┬─────────┘
                     │
              ┌──────▼──────┐
              │  Checkers   │   ← address / phone / opening hours
              └──────┬──────┘
                     │
              ┌──────▼──────┐
              │   Lints     │   ← advisory only, never flip a verdict
              └──────┬──────┘
                     │
              ┌──────▼──────┐
              │   Report    │   ← verdicts + advisories + audit hash
              └─────────────┘

Design principles:
  - A missing fact is a verdict (MISSING_INFO), not an exception.
  - Checkers are pure; the pipeline is the only place that logs a summary.
  - The raw facts are SHA-256 hashed for the audit trail.
"""

from __future__ import annotations

import hashlib
import json
import logging
from typing import Callable, Optional

from .checkers import CHECKERS, FactComplianceChecker
from .models import AdvisoryFinding, ComplianceReport, ComplianceVerdict, FactKind
from .sources import FactSource, StaticFactSource
from .validators import lint_address, lint_opening_hours, lint_phone_number

logger = logging.getLogger(__name__)

_LINTS: dict[FactKind, Callable[[Optional[str]], list[AdvisoryFinding]]] = {
    FactKind.ADDRESS: lint_address,
    FactKind.PHONE: lint_phone_number,
    FactKind.OPENING_HOURS: lint_opening_hours,
}


class ComplianceOrchestrator:
    """Runs every registered checker for one store.

    Usage:
        orchestrator = ComplianceOrchestrator()
        report = orchestrator.run(brand_source, retailer_source, store_id="paris-01")
        if not report.is_compliant:
            for verdict in report.verdicts:
                print(verdict.fact_kind, verdict.reason_code)
    """

    def __init__(self, checkers: dict[FactKind, FactComplianceChecker] | None = None):
        self.checkers = dict(CHECKERS) if checkers is None else dict(checkers)

    def run(self, brand: FactSource, retailer: FactSource, store_id: str = "UNKNOWN") -> ComplianceReport:
        """Fetch, check and lint every fact kind.

        Args:
            brand: Source of the brand page facts.
            retailer: Source of the retailer page facts.
            store_id: Label carried into the report.

        Returns:
            ComplianceReport with one verdict per checker.
        """
        verdicts: list[ComplianceVerdict] = []
        advisories: list[AdvisoryFinding] = []
        raw_facts: dict[str, dict[str, Optional[str]]] = {"brand": {}, "retailer": {}}

        for kind, checker in self.checkers.items():
            brand_value = brand.fetch(kind)
            retailer_value = retailer.fetch(kind)
            raw_facts["brand"][kind.value] = brand_value
            raw_facts["retailer"][kind.value] = retailer_value

            logger.info("Checking %s compliance for store '%s'", kind.value, store_id)
            verdicts.append(checker.check(brand_value, retailer_value))

            lint = _LINTS.get(kind)
            if lint is not None:
                advisories.extend(lint(retailer_value))

        report = ComplianceReport(
            store_id=store_id,
            is_compliant=all(v.is_compliant for v in verdicts),
            verdicts=verdicts,
            advisories=advisories,
            input_hash=_hash_facts(raw_facts),
        )
        _log_summary(report)
        return report

    def run_facts(
        self,
        brand_facts: dict[FactKind | str, Optional[str]],
        retailer_facts: dict[FactKind | str, Optional[str]],
        store_id: str = "UNKNOWN",
    ) -> ComplianceReport:
        """Convenience wrapper for plain dictionaries of raw facts."""
        return self.run(
            StaticFactSource(brand_facts, label="brand"),
            StaticFactSource(retailer_facts, label="retailer"),
            store_id=store_id,
        )


# ─── Helpers ─────────────────────────────────────────────────────────


def _hash_facts(raw_facts: dict[str, dict[str, Optional[str]]]) -> str:
    payload = json.dumps(raw_facts, sort_keys=True, ensure_ascii=False)
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()


def _log_summary(report: ComplianceReport) -> None:
    logger.info("=== Compliance summary for store '%s' ===", report.store_id)
    for verdict in report.verdicts:
        logger.info(
            "%-14s %s (%s)",
            verdict.fact_kind.value,
            "PASS" if verdict.is_compliant else "FAIL",
            verdict.reason_code.value,
        )
    logger.info("Overall: %s", "PASS" if report.is_compliant else "FAIL")
