import logging
import uuid

import pytest
from fastapi.testclient import TestClient

from dependencies import get_unit_of_work_factory
from main import app, create_app


@pytest.fixture
def api(uow_factory):
    app.dependency_overrides[get_unit_of_work_factory] = lambda: uow_factory
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def client_id(api):
    response = api.post("/api/clients", json={"name": "Acme", "email": "billing@acme.test"})
    assert response.status_code == 201
    return response.json()["id"]


def invoice_payload(client_id, **overrides):
    payload = {
        "client_id": client_id,
        "invoice_number": "INV-0001",
        "issue_date": "2026-10-01T00:00:00Z",
        "due_date": "2026-10-31T00:00:00Z",
        "currency": "USD",
        "total_amount": "200.00",
        "status": "Sent",
        "items": [{"description": "Consulting", "quantity": 2, "unit_price": "100.00"}],
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def invoice_id(api, client_id):
    response = api.post("/api/invoices", json=invoice_payload(client_id))
    assert response.status_code == 201
    return response.json()["id"]


def test_payment_flow_updates_invoice_status(api, invoice_id):
    first = api.post("/api/payments", json={"invoice_id": invoice_id, "amount_paid": "100.00"})
    assert first.status_code == 201
    assert api.get(f"/api/invoices/{invoice_id}").json()["status"] == "PartiallyPaid"

    api.post("/api/payments", json={"invoice_id": invoice_id, "amount_paid": "100.00", "payment_method": "Cash"})
    assert api.get(f"/api/invoices/{invoice_id}").json()["status"] == "Paid"

    payments = api.get(f"/api/invoices/{invoice_id}/payments").json()
    assert len(payments) == 2

    for payment in payments:
        assert api.delete(f"/api/payments/{payment['id']}").status_code == 204
    assert api.get(f"/api/invoices/{invoice_id}").json()["status"] == "Sent"


def test_payment_for_unknown_invoice_is_404(api):
    response = api.post("/api/payments", json={"invoice_id": str(uuid.uuid4()), "amount_paid": "10.00"})

    assert response.status_code == 404
    assert "not found" in response.json()["detail"]
    assert api.get("/api/payments").json() == []


def test_unknown_payment_update_and_delete_are_404(api, invoice_id):
    missing = str(uuid.uuid4())
    body = {"invoice_id": invoice_id, "amount_paid": "10.00"}

    assert api.put(f"/api/payments/{missing}", json=body).status_code == 404
    assert api.delete(f"/api/payments/{missing}").status_code == 404


def test_payment_amount_must_be_positive(api, invoice_id):
    response = api.post("/api/payments", json={"invoice_id": invoice_id, "amount_paid": "0"})
    assert response.status_code == 422


@pytest.mark.parametrize(
    "overrides",
    [
        {"currency": "usd"},
        {"currency": "US"},
        {"due_date": "2026-09-01T00:00:00Z"},
        {"total_amount": "-1.00"},
    ],
)
def test_invoice_validation(api, client_id, overrides):
    response = api.post("/api/invoices", json=invoice_payload(client_id, **overrides))
    assert response.status_code == 422


def test_invoice_items_and_balance(api, invoice_id):
    invoice = api.get(f"/api/invoices/{invoice_id}").json()
    assert invoice["items"][0]["total"] == "200.00"

    api.post("/api/payments", json={"invoice_id": invoice_id, "amount_paid": "50.00"})
    balance = api.get(f"/api/invoices/{invoice_id}/balance").json()

    assert balance["total_paid"] == "50.00"
    assert balance["outstanding"] == "150.00"
    assert balance["status"] == "PartiallyPaid"


def test_status_override(api, invoice_id):
    response = api.patch(f"/api/invoices/{invoice_id}/status", json={"status": "Cancelled"})
    assert response.status_code == 204
    assert api.get(f"/api/invoices/{invoice_id}").json()["status"] == "Cancelled"

    missing = api.patch(f"/api/invoices/{uuid.uuid4()}/status", json={"status": "Cancelled"})
    assert missing.status_code == 404


def test_client_invoices_and_delete(api, client_id, invoice_id):
    invoices = api.get(f"/api/clients/{client_id}/invoices").json()
    assert [i["id"] for i in invoices] == [invoice_id]

    assert api.delete(f"/api/clients/{client_id}").status_code == 204
    assert api.get(f"/api/clients/{client_id}").status_code == 404
    assert api.get(f"/api/invoices/{invoice_id}").status_code == 200


def test_client_phone_validation(api):
    response = api.post("/api/clients", json={"name": "A", "email": "a@example.com", "phone_number": "call me"})
    assert response.status_code == 422


@pytest.fixture
def root_logger():
    logger = logging.getLogger()
    level, handlers = logger.level, list(logger.handlers)
    yield logger
    logger.setLevel(level)
    logger.handlers = handlers


def test_creating_the_app_configures_logging(monkeypatch, root_logger):
    monkeypatch.setenv("LOG_LEVEL", "debug")

    create_app()

    assert root_logger.level == logging.DEBUG
    assert len(root_logger.handlers) == 1


def test_health_reports_database(api):
    response = api.get("/health")

    assert response.status_code == 200
    assert response.json() == {"database": "ok"}
