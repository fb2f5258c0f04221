from .base import Base, SoftDeleteMixin, utcnow
from .client import Client
from .invoice import Invoice, InvoiceStatus, derive_status
from .invoice_item import InvoiceItem
from .payment import Payment, PaymentMethod

__all__ = [
     "Base",
     "SoftDeleteMixin",
     "utcnow",
     "Client",
     "Invoice",
     "InvoiceStatus",
     "derive_status",
     "InvoiceItem",
     "Payment",
     "PaymentMethod",
]
