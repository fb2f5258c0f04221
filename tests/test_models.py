from decimal import Decimal

import pytest

from models import InvoiceItem, InvoiceStatus, derive_status


@pytest.mark.parametrize(
    "total_paid, expected",
    [
        ("0", InvoiceStatus.SENT),
        ("0.01", InvoiceStatus.PARTIALLY_PAID),
        ("199.99", InvoiceStatus.PARTIALLY_PAID),
        ("200.00", InvoiceStatus.PAID),
        ("250.00", InvoiceStatus.PAID),
    ],
)
def test_derive_status(total_paid, expected):
    assert derive_status(Decimal(total_paid), Decimal("200.00")) == expected


def test_zero_total_invoice_is_paid_without_payments():
    assert derive_status(Decimal("0"), Decimal("0")) == InvoiceStatus.PAID


def test_invoice_item_total_is_quantity_times_unit_price():
    item = InvoiceItem(description="Hours", quantity=3, unit_price=Decimal("12.50"))
    assert item.compute_total() == Decimal("37.50")
    assert item.total == Decimal("37.50")
