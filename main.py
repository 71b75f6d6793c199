#!/usr/bin/env python3
"""
Fact Compliance — Entry Point
=============================

Checks a store's address, phone number and opening hours as published on the
brand site against the retailer site.

Usage:
    python main.py                      # Bundled sample store
    python main.py store_facts.json     # Facts captured from two pages
    FACT_COMPLIANCE_LOG_LEVEL=DEBUG python main.py
"""

from __future__ import annotations

import sys

from fact_compliance.config import configure_logging, get_settings
from fact_compliance.exceptions import FactSourceError
from fact_compliance.models import ComplianceReport, Severity
from fact_compliance.pipeline import ComplianceOrchestrator
from fact_compliance.sources import StaticFactSource, load_store_facts

# ─── Sample Store: Same Facts, Two Formats ─────────────────────────

SAMPLE_STORE_ID = "SAMPLE-BERLIN-01"

SAMPLE_BRAND_FACTS = {
    "address": "Friedrichstraße 71,\n10117 Berlin",
    "phone": "+49 30 2094 6080",
    "opening_hours": (
        "Monday 10:00-19:00\n"
        "Tuesday 10:00-19:00\n"
        "Wednesday 10:00-19:00\n"
        "Thursday 10:00-19:00\n"
        "Friday 10:00-19:00\n"
        "Saturday 10:00-18:00\n"
        "Sunday Closed"
    ),
}

SAMPLE_RETAILER_FACTS = {
    "address": "Friedrichstrasse 71, 10117 Berlin",
    "phone": "0049 30 20946080",
    "opening_hours": (
        "Mon 10.00 - 19.00\n"
        "Tue 10.00 - 19.00\n"
        "Wed 10.00 - 19.00\n"
        "Thu 10.00 - 19.00\n"
        "Fri 10.00 - 19.00\n"
        "Sat 10.00 - 18.00"
    ),
}


# ─── ANSI Color Constants ───────────────────────────────────────────

_RED = "\033[91m"
_YELLOW = "\033[93m"
_GREEN = "\033[92m"
_CYAN = "\033[96m"
_DIM = "\033[2m"
_BOLD = "\033[1m"
_RESET = "\033[0m"
_WIDTH = 72


# ─── Pretty Printer Helpers ─────────────────────────────────────────


def _print_verdicts(report: ComplianceReport) -> None:
    """Print one line per fact with its reason code."""
    for v in report.verdicts:
        color = _GREEN if v.is_compliant else _RED
        status = "PASS" if v.is_compliant else "FAIL"
        print(f"  {v.fact_kind.value:<14} {color}{_BOLD}{status}{_RESET}  [{v.reason_code.value}]")
        print(f"  {'':<14} {v.message}")
        for k, value in v.details.items():
            if value or value == 0:
                print(f"  {'':<14} {_DIM}{k}: {value}{_RESET}")


def _print_advisories(report: ComplianceReport) -> None:
    """Print advisory findings (compact format)."""
    if not report.advisories:
        return
    print(f"\n  {_CYAN}ADVISORIES ({len(report.advisories)}){_RESET}")
    for f in report.advisories:
        color = _YELLOW if f.severity == Severity.WARNING else _DIM
        print(f"    {color}[{f.code}]{_RESET} {f.message}")


# ─── Pretty Printer ─────────────────────────────────────────────────


def print_report(report: ComplianceReport) -> int:
    """Pretty-print the compliance report with ANSI color codes.

    Returns:
        0 if every fact is compliant, 1 otherwise.
    """
    print(f"\n{'=' * _WIDTH}")
    print(f"{_BOLD}{_CYAN}  STORE FACT COMPLIANCE REPORT{_RESET}")
    print(f"{'=' * _WIDTH}")
    print(f"  Store:       {report.store_id}")
    print(f"  Audit Hash:  {_DIM}{report.input_hash[:16]}...{_RESET}")
    print(f"{'─' * _WIDTH}")

    _print_verdicts(report)
    _print_advisories(report)

    print(f"{'=' * _WIDTH}")
    if report.is_compliant:
        print(f"  {_GREEN}{_BOLD}RETAILER INFORMATION IS COMPLIANT{_RESET}")
    else:
        failed = sum(1 for v in report.verdicts if not v.is_compliant)
        print(f"  {_RED}{_BOLD}NOT COMPLIANT  --  {failed} fact(s) differ{_RESET}")
    print(f"{'=' * _WIDTH}\n")

    return 0 if report.is_compliant else 1


# ─── Main ────────────────────────────────────────────────────────────


def main(argv: list[str] | None = None) -> int:
    """Run the compliance pipeline and print the report; returns the exit code."""
    args = sys.argv[1:] if argv is None else argv
    settings = get_settings()
    configure_logging(settings)

    facts_path = args[0] if args else settings.facts_path
    orchestrator = ComplianceOrchestrator()

    if facts_path:
        try:
            store_id, brand, retailer = load_store_facts(facts_path)
        except FactSourceError as e:
            print(f"{_RED}[{e.code}]{_RESET} {e}", file=sys.stderr)
            return 2
    else:
        store_id = SAMPLE_STORE_ID
        brand = StaticFactSource(SAMPLE_BRAND_FACTS, label="brand")
        retailer = StaticFactSource(SAMPLE_RETAILER_FACTS, label="retailer")

    report = orchestrator.run(brand, retailer, store_id=store_id)
    return print_report(report)


if __name__ == "__main__":
    sys.exit(main())
