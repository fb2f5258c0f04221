import os

# Keep the application engine off the production server during tests
os.environ["DATABASE_URL"] = "sqlite://"

from datetime import datetime, timedelta, timezone
from decimal import Decimal
from functools import partial

import pytest
from sqlalchemy import event

from database import build_engine, build_session_factory, init_db
from models import Client, Invoice, InvoiceStatus, Payment, PaymentMethod
from services import ClientService, InvoiceService, PaymentService
from unit_of_work import UnitOfWork


@pytest.fixture
def engine(tmp_path):
    """Create a file-backed SQLite database for each test"""
    engine = build_engine(f"sqlite:///{tmp_path / 'billing.db'}")

    @event.listens_for(engine, "connect")
    def enable_foreign_keys(dbapi_connection, connection_record):
        # SQLite only enforces FOREIGN KEY constraints when asked to
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return build_session_factory(engine)


@pytest.fixture
def uow_factory(session_factory):
    return partial(UnitOfWork, session_factory)


@pytest.fixture
def client_service(uow_factory):
    return ClientService(uow_factory)


@pytest.fixture
def invoice_service(uow_factory):
    return InvoiceService(uow_factory)


@pytest.fixture
def payment_service(uow_factory):
    return PaymentService(uow_factory)


@pytest.fixture
def client(client_service):
    return client_service.create_client(
        Client(name="Acme Corp", email="billing@acme.test", company_name="Acme")
    )


def make_invoice(client_id, total="200.00", status=InvoiceStatus.SENT, number="INV-0001"):
    issued = datetime(2026, 10, 1, tzinfo=timezone.utc)
    return Invoice(
        client_id=client_id,
        invoice_number=number,
        issue_date=issued,
        due_date=issued + timedelta(days=30),
        currency="USD",
        total_amount=Decimal(total),
        status=status,
    )


def make_payment(invoice_id, amount, method=PaymentMethod.BANK_TRANSFER):
    return Payment(invoice_id=invoice_id, amount_paid=Decimal(amount), payment_method=method)


@pytest.fixture
def invoice(invoice_service, client):
    """Invoice for 200.00 with no payments"""
    return invoice_service.create_invoice(make_invoice(client.id))
