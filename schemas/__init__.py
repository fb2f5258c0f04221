from .client import ClientCreate, ClientUpdate, ClientResponse
from .invoice import (
     InvoiceItemCreate,
     InvoiceItemResponse,
     InvoiceCreate,
     InvoiceUpdate,
     InvoiceStatusUpdate,
     InvoiceResponse,
     InvoiceBalanceResponse,
)
from .payment import PaymentCreate, PaymentUpdate, PaymentResponse

__all__ = [
     "ClientCreate",
     "ClientUpdate",
     "ClientResponse",
     "InvoiceItemCreate",
     "InvoiceItemResponse",
     "InvoiceCreate",
     "InvoiceUpdate",
     "InvoiceStatusUpdate",
     "InvoiceResponse",
     "InvoiceBalanceResponse",
     "PaymentCreate",
     "PaymentUpdate",
     "PaymentResponse",
]
