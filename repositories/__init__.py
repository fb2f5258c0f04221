"""
Repository layer for data access abstraction.

This package contains repository classes that encapsulate database queries
and provide a clean interface for data access operations.
"""

from .base_repository import BaseRepository
from .client_repository import ClientRepository
from .invoice_repository import InvoiceRepository
from .payment_repository import PaymentRepository

__all__ = [
     "BaseRepository",
     "ClientRepository",
     "InvoiceRepository",
     "PaymentRepository",
]
