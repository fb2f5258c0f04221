from .client_service import ClientService
from .invoice_service import InvoiceService
from .payment_service import PaymentService

__all__ = [
     "ClientService",
     "InvoiceService",
     "PaymentService",
]
