import uuid
from decimal import Decimal

import pytest
from sqlalchemy.exc import IntegrityError

from conftest import make_invoice, make_payment
from models import Client, Payment
from models.base import utcnow
from repositories import ClientRepository, InvoiceRepository, PaymentRepository


@pytest.fixture
def clients():
    return ClientRepository()


@pytest.fixture
def invoices():
    return InvoiceRepository()


@pytest.fixture
def payments():
    return PaymentRepository()


def create_in_transaction(uow_factory, repository, entity):
    with uow_factory() as uow:
        uow.begin()
        created = repository.create(uow, entity)
        uow.commit()
    return created


class TestCreateAndRead:

    def test_create_assigns_id_and_created_at(self, uow_factory, clients):
        client = create_in_transaction(uow_factory, clients, Client(name="A", email="a@example.com"))

        assert client.id is not None
        assert client.created_at is not None
        assert client.updated_at is None
        assert client.is_deleted is False

    def test_create_keeps_caller_supplied_id(self, uow_factory, clients):
        client_id = uuid.uuid4()
        client = create_in_transaction(
            uow_factory, clients, Client(id=client_id, name="A", email="a@example.com")
        )
        assert client.id == client_id

    def test_round_trip(self, uow_factory, clients):
        created = create_in_transaction(
            uow_factory,
            clients,
            Client(name="A", email="a@example.com", company_name="Co", address="1 Main St", phone_number="555-0100"),
        )

        with uow_factory() as uow:
            loaded = clients.get_by_id(uow, created.id)

        assert loaded is not created
        for field in ClientRepository.mutable_fields:
            assert getattr(loaded, field) == getattr(created, field)

    def test_get_by_id_missing_returns_none(self, uow_factory, clients):
        with uow_factory() as uow:
            assert clients.get_by_id(uow, uuid.uuid4()) is None

    def test_get_all_excludes_deleted(self, uow_factory, clients):
        keep = create_in_transaction(uow_factory, clients, Client(name="Keep", email="k@example.com"))
        drop = create_in_transaction(uow_factory, clients, Client(name="Drop", email="d@example.com"))

        with uow_factory() as uow:
            uow.begin()
            clients.delete(uow, drop.id)
            uow.commit()

        with uow_factory() as uow:
            assert [c.id for c in clients.get_all(uow)] == [keep.id]
            assert clients.get_by_id(uow, drop.id) is None
            assert len(clients.get_all(uow)) == 1


class TestUpdate:

    def test_update_overwrites_mutable_fields(self, uow_factory, clients):
        created = create_in_transaction(uow_factory, clients, Client(name="A", email="a@example.com"))

        with uow_factory() as uow:
            uow.begin()
            changed = clients.update(uow, Client(id=created.id, name="B", email="b@example.com"))
            uow.commit()

        with uow_factory() as uow:
            loaded = clients.get_by_id(uow, created.id)

        assert changed is True
        assert loaded.name == "B"
        assert loaded.email == "b@example.com"
        assert loaded.updated_at is not None

    def test_update_missing_returns_false(self, uow_factory, clients):
        with uow_factory() as uow:
            uow.begin()
            assert clients.update(uow, Client(id=uuid.uuid4(), name="B", email="b@example.com")) is False
            uow.commit()

        with uow_factory() as uow:
            assert clients.get_all(uow) == []

    def test_update_deleted_returns_false(self, uow_factory, clients):
        created = create_in_transaction(uow_factory, clients, Client(name="A", email="a@example.com"))
        with uow_factory() as uow:
            uow.begin()
            clients.delete(uow, created.id)
            assert clients.update(uow, Client(id=created.id, name="B", email="b@example.com")) is False
            uow.commit()


class TestDelete:

    def test_delete_is_soft(self, uow_factory, clients):
        created = create_in_transaction(uow_factory, clients, Client(name="A", email="a@example.com"))

        with uow_factory() as uow:
            uow.begin()
            assert clients.delete(uow, created.id) is True
            uow.commit()

        with uow_factory() as uow:
            row = uow.session.get(Client, created.id)

        assert row is not None
        assert row.is_deleted is True
        assert row.updated_at is not None

    def test_delete_twice_returns_false(self, uow_factory, clients):
        created = create_in_transaction(uow_factory, clients, Client(name="A", email="a@example.com"))

        with uow_factory() as uow:
            uow.begin()
            assert clients.delete(uow, created.id) is True
            assert clients.delete(uow, created.id) is False
            uow.commit()


class TestEntityQueries:

    def test_get_invoices_by_client_id(self, uow_factory, clients, invoices):
        first = create_in_transaction(uow_factory, clients, Client(name="A", email="a@example.com"))
        second = create_in_transaction(uow_factory, clients, Client(name="B", email="b@example.com"))
        mine = create_in_transaction(uow_factory, invoices, make_invoice(first.id, number="INV-1"))
        create_in_transaction(uow_factory, invoices, make_invoice(second.id, number="INV-2"))

        with uow_factory() as uow:
            result = invoices.get_by_client_id(uow, first.id)

        assert [i.id for i in result] == [mine.id]

    def test_payments_by_invoice_and_total_paid_skip_deleted(self, uow_factory, client, invoices, payments):
        invoice = create_in_transaction(uow_factory, invoices, make_invoice(client.id))

        with uow_factory() as uow:
            uow.begin()
            kept = make_payment(invoice.id, "30.00")
            kept.payment_date = utcnow()
            payments.create(uow, kept)
            dropped = make_payment(invoice.id, "50.00")
            dropped.payment_date = utcnow()
            payments.create(uow, dropped)
            payments.delete(uow, dropped.id)
            uow.commit()

        with uow_factory() as uow:
            active = payments.get_by_invoice_id(uow, invoice.id)
            total = payments.total_paid(uow, invoice.id)

        assert [p.id for p in active] == [kept.id]
        assert total == Decimal("30.00")

    def test_total_paid_without_payments_is_zero(self, uow_factory, client, invoices, payments):
        invoice = create_in_transaction(uow_factory, invoices, make_invoice(client.id))
        with uow_factory() as uow:
            assert payments.total_paid(uow, invoice.id) == Decimal("0")

    def test_writes_join_the_open_transaction(self, uow_factory, client, invoices, payments):
        invoice = create_in_transaction(uow_factory, invoices, make_invoice(client.id))

        with uow_factory() as uow:
            uow.begin()
            payment = make_payment(invoice.id, "10.00")
            payment.payment_date = utcnow()
            payments.create(uow, payment)
            uow.rollback()

        with uow_factory() as uow:
            assert uow.session.query(Payment).count() == 0


def test_payment_must_reference_an_existing_invoice(uow_factory, payments):
    with uow_factory() as uow:
        uow.begin()
        payment = make_payment(uuid.uuid4(), "10.00")
        payment.payment_date = utcnow()
        with pytest.raises(IntegrityError):
            payments.create(uow, payment)
        uow.rollback()

    with uow_factory() as uow:
        assert payments.get_all(uow) == []
