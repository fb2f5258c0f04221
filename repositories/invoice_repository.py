"""
Invoice repository for invoice-specific data access operations.
"""

from typing import Any, List

from models import Invoice
from unit_of_work import UnitOfWork
from .base_repository import BaseRepository


class InvoiceRepository(BaseRepository[Invoice]):
     """Repository for Invoice model operations."""

     # Line items are written with the invoice on create and never replaced here
     mutable_fields = (
          "invoice_number",
          "client_id",
          "issue_date",
          "due_date",
          "status",
          "total_amount",
          "currency",
          "notes",
     )

     def __init__(self):
          super().__init__(Invoice)

     def get_by_client_id(self, uow: UnitOfWork, client_id: Any) -> List[Invoice]:
          """
          Get the active invoices issued to a client.

          Args:
               uow: Unit of work of the current operation
               client_id: Client UUID

          Returns:
               Invoices ordered by issue date
          """
          return self._active(uow).filter(
               self.model.client_id == client_id
          ).order_by(self.model.issue_date).all()
