"""
FastAPI endpoint tests for the Fact Compliance API.

Uses httpx + FastAPI TestClient — no real server needed, no browser.
"""

from __future__ import annotations

import api
import pytest
from api import app
from fastapi.testclient import TestClient

from fact_compliance.pipeline import ComplianceOrchestrator

client = TestClient(app)


@pytest.fixture(scope="module", autouse=True)
def _warm_orchestrator() -> None:
    """Initialise the orchestrator once for all API tests (bypasses lifespan)."""
    api._orchestrator = ComplianceOrchestrator()
    yield  # type: ignore[misc]
    api._orchestrator = None


# ─── Sample store (same facts, two formats) ─────────────────────────

STORE = {
    "store_id": "PARIS-01",
    "brand": {
        "address": "12 Rue de la Paix, 75002 Paris",
        "phone": "+33 1 42 68 53 00",
        "opening_hours": "Monday 10:00-19:00\nSunday closed",
    },
    "retailer": {
        "address": "12 rue de la Paix,\n75002 Paris",
        "phone": "0033142685300",
        "opening_hours": "Mon 10h00-19h00",
    },
}


class TestHealthEndpoint:
    def test_health_returns_200(self) -> None:
        resp = client.get("/health")
        assert resp.status_code == 200

    def test_health_response_shape(self) -> None:
        data = client.get("/health").json()
        assert data["status"] == "healthy"
        assert data["version"] == "1.0.0"
        assert data["checkers"] == ["address", "phone", "opening_hours"]


class TestSingleFactEndpoint:
    def test_phone_country_code_difference(self) -> None:
        resp = client.post(
            "/check/phone", json={"brand": "+33 1 42 68 53 00", "retailer": "0033142685300"}
        )
        assert resp.status_code == 200
        data = resp.json()
        assert data["fact_kind"] == "phone"
        assert data["is_compliant"] is True
        assert data["reason_code"] == "COUNTRY_CODE_DIFFERENCE"

    def test_hours_mismatch_lists_days(self) -> None:
        data = client.post(
            "/check/opening_hours",
            json={"brand": "Monday 9h00-18h00", "retailer": "Monday 9h00-19h00"},
        ).json()
        assert data["is_compliant"] is False
        assert data["reason_code"] == "DAY_HOURS_MISMATCH"
        assert data["details"]["differing_days"] == ["monday"]

    def test_null_value_is_missing_info(self) -> None:
        data = client.post("/check/address", json={"brand": None, "retailer": "12 Main St"}).json()
        assert data["reason_code"] == "MISSING_INFO"
        assert data["is_compliant"] is False

    def test_omitted_value_is_missing_info(self) -> None:
        data = client.post("/check/address", json={"retailer": "12 Main St"}).json()
        assert data["reason_code"] == "MISSING_INFO"

    def test_unknown_fact_kind(self) -> None:
        resp = client.post("/check/fax", json={"brand": "1", "retailer": "1"})
        assert resp.status_code == 404
        assert "fax" in resp.json()["detail"]


class TestStoreEndpoint:
    def test_compliant_store(self) -> None:
        resp = client.post("/check", json=STORE)
        assert resp.status_code == 200
        data = resp.json()
        assert data["store_id"] == "PARIS-01"
        assert data["is_compliant"] is True
        assert data["failed_count"] == 0
        assert len(data["input_hash"]) == 64

    def test_one_verdict_per_fact(self) -> None:
        data = client.post("/check", json=STORE).json()
        reasons = {v["fact_kind"]: v["reason_code"] for v in data["verdicts"]}
        assert reasons == {
            "address": "EXACT_MATCH",
            "phone": "COUNTRY_CODE_DIFFERENCE",
            "opening_hours": "CLOSING_DAYS_OMITTED",
        }

    def test_failed_count_and_advisories(self) -> None:
        body = {**STORE, "retailer": {**STORE["retailer"], "phone": "06 12 34 56 78"}}
        data = client.post("/check", json=body).json()
        assert data["is_compliant"] is False
        assert data["failed_count"] == 1
        assert [a["code"] for a in data["advisories"]] == ["PHONE_LOOKS_MOBILE"]
        assert data["advisories"][0]["severity"] == "INFO"

    def test_missing_retailer_facts(self) -> None:
        body = {"brand": STORE["brand"], "retailer": {}}
        data = client.post("/check", json=body).json()
        assert data["store_id"] == "UNKNOWN"
        assert data["failed_count"] == 3
        assert {v["reason_code"] for v in data["verdicts"]} == {"MISSING_INFO"}

    def test_rejects_missing_body_fields(self) -> None:
        resp = client.post("/check", json={"store_id": "X"})
        assert resp.status_code == 422


class TestOrchestratorNotReady:
    def test_store_check_returns_503(self) -> None:
        api._orchestrator = None
        try:
            resp = client.post("/check", json=STORE)
            assert resp.status_code == 503
        finally:
            api._orchestrator = ComplianceOrchestrator()
