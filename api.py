"""
Fact Compliance — FastAPI Server
================================

RESTful API for comparing store facts published on two pages.

Endpoints:
    POST /check/{fact_kind}   Compare one fact (address, phone, opening_hours)
    POST /check               Compare all facts of one store
    GET  /health              Health check / readiness probe

Run:
    uvicorn api:app --reload              # Dev (http://localhost:8000)
    uvicorn api:app --host 0.0.0.0        # Production

Docs:
    http://localhost:8000/docs             # Swagger UI (auto-generated)
    http://localhost:8000/redoc            # ReDoc (alternative)
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from fact_compliance import __version__
from fact_compliance.checkers import check_fact
from fact_compliance.config import configure_logging
from fact_compliance.exceptions import FactSourceError, UnknownFactKindError
from fact_compliance.models import AdvisoryFinding, ComplianceReport, ComplianceVerdict
from fact_compliance.pipeline import ComplianceOrchestrator


# ─── Application Lifespan (pre-warm orchestrator) ───────────────────

_orchestrator: ComplianceOrchestrator | None = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging and build the orchestrator on startup."""
    global _orchestrator  # noqa: PLW0603
    configure_logging()
    _orchestrator = ComplianceOrchestrator()
    yield
    _orchestrator = None


# ─── FastAPI App ─────────────────────────────────────────────────────

app = FastAPI(
    title="Fact Compliance API",
    description=(
        "Decides whether a store's address, phone number and opening hours, "
        "as published on a brand site and a retailer site, describe the same "
        "real-world fact despite formatting, language and completeness "
        "differences."
    ),
    version=__version__,
    lifespan=lifespan,
)


# ─── Request / Response Schemas ─────────────────────────────────────


class FactPairRequest(BaseModel):
    """Request body for the /check/{fact_kind} endpoint."""

    brand: Optional[str] = Field(None, description="Value as published on the brand site.")
    retailer: Optional[str] = Field(None, description="Value as published on the retailer site.")

    model_config = {"json_schema_extra": {"example": {
        "brand": "+33 1 42 68 53 00",
        "retailer": "0033142685300",
    }}}


class StoreFacts(BaseModel):
    """Raw facts captured from one page. Absent facts are null."""

    address: Optional[str] = None
    phone: Optional[str] = None
    opening_hours: Optional[str] = None


class StoreCheckRequest(BaseModel):
    """Request body for the /check endpoint."""

    store_id: str = Field("UNKNOWN", description="Label carried into the report.")
    brand: StoreFacts
    retailer: StoreFacts

    model_config = {"json_schema_extra": {"example": {
        "store_id": "PARIS-01",
        "brand": {
            "address": "12 Rue de la Paix, 75002 Paris",
            "phone": "+33 1 42 68 53 00",
            "opening_hours": "Monday 10:00-19:00\nSunday closed",
        },
        "retailer": {
            "address": "12 rue de la Paix,\n75002 Paris",
            "phone": "01 42 68 53 00",
            "opening_hours": "Mon 10h00-19h00",
        },
    }}}


class VerdictOut(ComplianceVerdict):
    """API-facing verdict (inherits all fields from ComplianceVerdict)."""


class AdvisoryOut(AdvisoryFinding):
    """API-facing advisory finding (inherits all fields from AdvisoryFinding)."""


class StoreCheckResponse(BaseModel):
    """Structured compliance report returned by the API."""

    store_id: str
    is_compliant: bool
    input_hash: str = Field(description="SHA-256 hash of the raw facts")
    failed_count: int
    verdicts: list[VerdictOut]
    advisories: list[AdvisoryOut]


class HealthResponse(BaseModel):
    status: str
    version: str
    checkers: list[str]


# ─── Helpers ─────────────────────────────────────────────────────────


def _get_orchestrator() -> ComplianceOrchestrator:
    if _orchestrator is None:
        raise HTTPException(status_code=503, detail="Orchestrator not initialised")
    return _orchestrator


def _build_response(report: ComplianceReport) -> StoreCheckResponse:
    """Convert the internal ComplianceReport to the API response schema."""
    return StoreCheckResponse(
        store_id=report.store_id,
        is_compliant=report.is_compliant,
        input_hash=report.input_hash,
        failed_count=sum(1 for v in report.verdicts if not v.is_compliant),
        verdicts=[VerdictOut.model_validate(v, from_attributes=True) for v in report.verdicts],
        advisories=[AdvisoryOut.model_validate(f, from_attributes=True) for f in report.advisories],
    )


# ─── Endpoints ───────────────────────────────────────────────────────


@app.post(
    "/check/{fact_kind}",
    summary="Compare one fact across the brand and retailer pages",
    tags=["Compliance"],
    responses={404: {"description": "Unknown fact kind"}},
)
def check_single_fact(fact_kind: str, request: FactPairRequest) -> VerdictOut:
    """Run one checker. Null, empty and blank values yield MISSING_INFO."""
    try:
        verdict = check_fact(fact_kind, request.brand, request.retailer)
    except UnknownFactKindError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    return VerdictOut.model_validate(verdict, from_attributes=True)


@app.post(
    "/check",
    summary="Compare every fact of one store",
    tags=["Compliance"],
    responses={
        422: {"description": "Malformed store facts"},
        503: {"description": "Orchestrator not yet initialised"},
    },
)
def check_store(request: StoreCheckRequest) -> StoreCheckResponse:
    """Run all three checkers plus advisory lints and return the report.

    - **is_compliant**: `true` only when every fact is compliant
    - **verdicts**: one per fact kind, with reason code
    - **advisories**: lint observations on the retailer values
    - **input_hash**: SHA-256 of the raw facts for audit trail
    """
    orchestrator = _get_orchestrator()
    try:
        report = orchestrator.run_facts(
            request.brand.model_dump(),
            request.retailer.model_dump(),
            store_id=request.store_id,
        )
    except FactSourceError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    return _build_response(report)


@app.get(
    "/health",
    summary="Health check",
    tags=["System"],
    responses={503: {"description": "Orchestrator not yet initialised"}},
)
def health_check() -> HealthResponse:
    """Returns service status and the registered checkers."""
    orchestrator = _get_orchestrator()
    return HealthResponse(
        status="healthy",
        version=__version__,
        checkers=[kind.value for kind in orchestrator.checkers],
    )
