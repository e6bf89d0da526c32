"""
Tests for the Campaign Credit HTTP API

Tests cover:
1. Health check
2. Crediting an award end to end
3. Error status mapping (invalid amount, unsupported type, duplicate reference)
4. Account and transaction lookups
"""

import re

from fastapi.testclient import TestClient

from campaign_credit import api
from campaign_credit.api import app


client = TestClient(app)


def award_payload(value="100", award_type="CREDIT", award_id=1):
    return {"id": award_id, "type": award_type, "value": value, "campaign": {"id": 9, "name": "API Campaign"}}


class TestCreditAwardEndpoint:
    """Tests for the award crediting and lookup endpoints."""

    def test_health(self):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_credit_award(self):
        response = client.post("/awards/credit", json={
            "user_id": "api-user-1", "award": award_payload(award_id=5), "reward_id": 11,
        })

        assert response.status_code == 201
        body = response.json()
        sn = body["reward"]["sn"]
        assert re.match(r"^CAMPAIGN-5-[0-9a-f-]{36}$", sn)
        assert body["reward"]["id"] == 11
        assert body["currency"] == api.settings.default_currency_code

        transaction = client.get(f"/transactions/{sn}")
        assert transaction.status_code == 200
        assert transaction.json()["amount"] == 100

        account = client.get(f"/users/api-user-1/accounts/{api.settings.default_currency_code}")
        assert account.status_code == 200
        assert account.json()["balance"] == 100

    def test_invalid_amount(self):
        response = client.post("/awards/credit", json={"user_id": "api-user-2", "award": award_payload(value="0")})
        assert response.status_code == 400

    def test_unsupported_award_type(self):
        response = client.post("/awards/credit", json={
            "user_id": "api-user-3", "award": award_payload(award_type="COUPON"),
        })
        assert response.status_code == 400

    def test_duplicate_reference_conflict(self, monkeypatch):
        monkeypatch.setattr("campaign_credit.processor.make_transaction_reference", lambda award_id: "CAMPAIGN-6-fixed")
        payload = {"user_id": "api-user-4", "award": award_payload(award_id=6)}

        assert client.post("/awards/credit", json=payload).status_code == 201
        assert client.post("/awards/credit", json=payload).status_code == 409

    def test_unknown_transaction(self):
        assert client.get("/transactions/CAMPAIGN-0-missing").status_code == 404

    def test_unknown_account(self):
        assert client.get("/users/nobody/accounts/CREDIT").status_code == 404
