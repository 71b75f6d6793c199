"""
Exception hierarchy for the layers around the compliance engine.

The checkers themselves never raise: every input resolves to a verdict.
These exceptions belong to the outer surfaces (fact files, CLI, API).
"""

from __future__ import annotations


class ComplianceError(Exception):
    """Base exception for fact compliance failures outside the checkers."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.details = details or {}
        super().__init__(message)


class FactSourceError(ComplianceError):
    """A facts file could not be read or does not have the expected shape."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("FACT_SOURCE_INVALID", message, details)


class UnknownFactKindError(ComplianceError):
    """A caller asked for a fact kind no checker handles."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("UNKNOWN_FACT_KIND", message, details)
