"""Mini README: Tests for the FastAPI JSON interface.

The application is built around a prebuilt fetcher so the routes can be
exercised without touching the environment, plus one check that the factory
falls back to the export named in the settings.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from transaction_insights.analytics import TransactionDataFetcher
from transaction_insights.interface import create_application


@pytest.fixture()
def client(fetcher) -> TestClient:
    return TestClient(create_application(fetcher))


def test_summary_endpoint(client) -> None:
    response = client.get("/summary", params={"client": "Arthur Shelby"})
    assert response.status_code == 200
    body = response.json()
    assert body["top_sender"] == "Arthur Shelby"
    assert body["client"]["has_open_compliance_issues"] is True


def test_scalar_endpoints(client) -> None:
    assert client.get("/transactions/total-amount").json()["total_amount"] == pytest.approx(2889.17)
    assert client.get("/transactions/max-amount").json()["max_amount"] == pytest.approx(985.0)
    assert client.get("/clients/count").json()["unique_clients"] == 14
    assert client.get("/clients/tom shelby/total-sent").json()["total_sent"] == pytest.approx(678.06)
    assert client.get("/clients/Billy Kimber/open-issues").json()["has_open_compliance_issues"] is False
    assert client.get("/senders/top").json()["top_sender"] == "Arthur Shelby"


def test_issue_endpoints(client) -> None:
    assert client.get("/issues/unsolved").json()["issue_ids"] == [1, 3, 15, 54, 99]
    assert client.get("/issues/solved-messages").json()["messages"][0] == "Never gonna give you up"


def test_top_transactions_endpoint(client) -> None:
    response = client.get("/transactions/top", params={"limit": 2})
    assert [entry["amount"] for entry in response.json()["transactions"]] == [985.0, 666.0]
    assert client.get("/transactions/top", params={"limit": -1}).status_code == 422


def test_beneficiaries_endpoint(client) -> None:
    grouped = client.get("/beneficiaries").json()["beneficiaries"]
    assert [entry["issueId"] for entry in grouped["Michael Gray"]] == [54, 78, 99]


def test_empty_dataset_max_amount_is_not_found() -> None:
    client = TestClient(create_application(TransactionDataFetcher([])))

    assert client.get("/transactions/max-amount").status_code == 404
    assert client.get("/senders/top").json() == {"top_sender": None}


def test_factory_loads_export_from_settings(monkeypatch, reference_path) -> None:
    monkeypatch.setenv("TRANSACTION_INSIGHTS_DATA_FILE", str(reference_path))

    client = TestClient(create_application())
    assert client.get("/clients/count").json()["unique_clients"] == 14
