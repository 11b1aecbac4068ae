"""Endpoint tests for /api/candidate_management."""

from __future__ import annotations

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from app.core.database import SessionLocal
from app.models import CandidateManagement

URL = "/api/candidate_management"


def _count_records() -> int:
    db = SessionLocal()
    try:
        return db.query(CandidateManagement).count()
    finally:
        db.close()


def _payload(seeded: dict, **overrides) -> dict:
    body = {
        "candidate_id": seeded["ana"],
        "management_id": seeded["acme_mgmt"],
        "start_date": "2024-01-01",
        "end_date": "2099-01-01",
        "position": "Engineer",
        "rate": "50.5",
    }
    body.update(overrides)
    return body


# ---------------------------------------------------------------------------
# POST /api/candidate_management
# ---------------------------------------------------------------------------


class TestCreate:
    """Creating engagements."""

    def test_future_end_date_creates_active_record(
        self, test_client: TestClient, seeded: dict
    ) -> None:
        res = test_client.post(URL, json=_payload(seeded))

        assert res.status_code == 201
        data = res.json()
        assert data["id"] > 0
        assert data["status"] == "active"
        assert data["rate"] == 50.5
        assert isinstance(data["rate"], float)
        assert data["position"] == "Engineer"
        assert data["end_date"].startswith("2099-01-01")

    def test_future_end_date_arms_a_job(self, test_client: TestClient, seeded: dict) -> None:
        res = test_client.post(URL, json=_payload(seeded))

        scheduler = test_client.app.state.disengagement_scheduler
        assert scheduler.pending() == [res.json()["id"]]

    def test_missing_end_date_is_disengaged(
        self, test_client: TestClient, seeded: dict
    ) -> None:
        """Open-ended engagements start disengaged. This looks inverted but
        is the behaviour existing clients see."""
        body = _payload(seeded)
        del body["end_date"]

        res = test_client.post(URL, json=body)

        assert res.status_code == 201
        assert res.json()["status"] == "disengaged"
        assert res.json()["end_date"] is None
        assert test_client.app.state.disengagement_scheduler.pending() == []

    def test_past_end_date_is_active_without_job(
        self, test_client: TestClient, seeded: dict
    ) -> None:
        res = test_client.post(URL, json=_payload(seeded, end_date="2020-06-30"))

        assert res.status_code == 201
        assert res.json()["status"] == "active"
        assert test_client.app.state.disengagement_scheduler.pending() == []

    def test_numeric_rate_accepted(self, test_client: TestClient, seeded: dict) -> None:
        res = test_client.post(URL, json=_payload(seeded, rate=42))

        assert res.status_code == 201
        assert res.json()["rate"] == 42.0

    @pytest.mark.parametrize("missing", ["position", "rate"])
    def test_missing_required_field_is_400(
        self, test_client: TestClient, seeded: dict, missing: str
    ) -> None:
        body = _payload(seeded)
        del body[missing]

        res = test_client.post(URL, json=body)

        assert res.status_code == 400
        assert res.json()["error"]["type"] == "ValidationError"
        assert _count_records() == 0

    @pytest.mark.parametrize(
        "field,value",
        [("position", ""), ("position", "   "), ("rate", ""), ("rate", None)],
    )
    def test_blank_required_field_is_400(
        self, test_client: TestClient, seeded: dict, field: str, value
    ) -> None:
        res = test_client.post(URL, json=_payload(seeded, **{field: value}))

        assert res.status_code == 400
        assert _count_records() == 0

    @pytest.mark.parametrize("rate", ["abc", "nan", "inf"])
    def test_non_finite_rate_is_400(
        self, test_client: TestClient, seeded: dict, rate: str
    ) -> None:
        res = test_client.post(URL, json=_payload(seeded, rate=rate))

        assert res.status_code == 400
        assert _count_records() == 0

    @pytest.mark.parametrize("rate", [True, False, 0, 0.0, "0"])
    def test_boolean_or_zero_rate_is_400(
        self, test_client: TestClient, seeded: dict, rate
    ) -> None:
        res = test_client.post(URL, json=_payload(seeded, rate=rate))

        assert res.status_code == 400
        assert res.json()["error"]["type"] == "ValidationError"
        assert _count_records() == 0

    def test_position_is_stored_as_sent(self, test_client: TestClient, seeded: dict) -> None:
        res = test_client.post(URL, json=_payload(seeded, position="  Senior Engineer "))

        assert res.status_code == 201
        assert res.json()["position"] == "  Senior Engineer "
        db = SessionLocal()
        try:
            stored = db.get(CandidateManagement, res.json()["id"])
            assert stored.position == "  Senior Engineer "
        finally:
            db.close()

    def test_far_future_end_date_is_armed(self, test_client: TestClient, seeded: dict) -> None:
        res = test_client.post(URL, json=_payload(seeded, end_date="9999-12-31"))

        assert res.status_code == 201
        assert res.json()["status"] == "active"
        health = test_client.get("/health").json()
        assert health["pending_disengagements"] == 1

    def test_missing_start_date_is_400(self, test_client: TestClient, seeded: dict) -> None:
        body = _payload(seeded)
        del body["start_date"]

        res = test_client.post(URL, json=body)

        assert res.status_code == 400

    def test_bad_date_is_400(self, test_client: TestClient, seeded: dict) -> None:
        res = test_client.post(URL, json=_payload(seeded, end_date="next tuesday"))

        assert res.status_code == 400
        assert res.json()["error"]["details"]["field"] == "end_date"

    def test_missing_references_is_400(self, test_client: TestClient, seeded: dict) -> None:
        body = _payload(seeded)
        del body["management_id"]

        res = test_client.post(URL, json=body)

        assert res.status_code == 400

    def test_non_object_body_is_400(self, test_client: TestClient, seeded: dict) -> None:
        res = test_client.post(URL, content=b"not json", headers={"Content-Type": "application/json"})

        assert res.status_code == 400

    def test_store_failure_is_opaque_500(self, test_client: TestClient, seeded: dict) -> None:
        with patch(
            "sqlalchemy.orm.Session.commit",
            side_effect=OperationalError("INSERT", {}, Exception("disk I/O error")),
        ):
            res = test_client.post(URL, json=_payload(seeded))

        assert res.status_code == 500
        body = res.json()
        assert body["error"]["type"] == "InternalError"
        assert "disk" not in body["error"]["message"]


# ---------------------------------------------------------------------------
# GET /api/candidate_management
# ---------------------------------------------------------------------------


class TestList:
    """Listing a company's engagements."""

    def test_no_records_is_empty_list(self, test_client: TestClient, seeded: dict) -> None:
        res = test_client.get(URL, params={"company_id": 1})

        assert res.status_code == 200
        assert res.json() == []

    def test_unknown_company_is_empty_list(self, test_client: TestClient, seeded: dict) -> None:
        res = test_client.get(URL, params={"company_id": 12345})

        assert res.status_code == 200
        assert res.json() == []

    def test_lists_only_the_company_records_with_candidate(
        self, test_client: TestClient, seeded: dict, make_engagement
    ) -> None:
        first = make_engagement(seeded["ana"], seeded["acme_mgmt"])
        second = make_engagement(seeded["luis"], seeded["acme_mgmt"], position="QA")
        make_engagement(seeded["luis"], seeded["globex_mgmt"])

        res = test_client.get(URL, params={"company_id": seeded["acme"]})

        assert res.status_code == 200
        data = res.json()
        assert [r["id"] for r in data] == [first, second]
        assert data[0]["candidates"]["name"] == "Ana"
        assert data[1]["candidates"]["name"] == "Luis"
        assert data[1]["position"] == "QA"

    @pytest.mark.parametrize("company_id", ["abc", "0", "-3", "1.5", ""])
    def test_invalid_company_id_is_400(
        self, test_client: TestClient, seeded: dict, company_id: str
    ) -> None:
        res = test_client.get(URL, params={"company_id": company_id})

        assert res.status_code == 400
        assert res.json()["error"]["message"] == "Invalid company ID"

    def test_missing_company_id_is_400(self, test_client: TestClient, seeded: dict) -> None:
        res = test_client.get(URL)

        assert res.status_code == 400

    def test_store_failure_is_500(self, test_client: TestClient, seeded: dict) -> None:
        with patch(
            "app.candidate_management.service.CandidateManagementService.list_for_company",
            side_effect=OperationalError("SELECT", {}, Exception("connection lost")),
        ):
            res = test_client.get(URL, params={"company_id": seeded["acme"]})

        assert res.status_code == 500
        assert res.json()["error"]["message"] == "Internal server error"
