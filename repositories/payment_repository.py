"""
Payment repository for payment-specific data access operations.
"""

from decimal import Decimal
from typing import Any, List

from models import Payment
from unit_of_work import UnitOfWork
from .base_repository import BaseRepository


class PaymentRepository(BaseRepository[Payment]):
     """Repository for Payment model operations."""

     mutable_fields = (
          "invoice_id",
          "amount_paid",
          "payment_date",
          "payment_method",
          "reference_number",
          "notes",
     )

     def __init__(self):
          super().__init__(Payment)

     def get_by_invoice_id(self, uow: UnitOfWork, invoice_id: Any) -> List[Payment]:
          """
          Get the active payments applied against an invoice.

          Args:
               uow: Unit of work of the current operation
               invoice_id: Invoice UUID

          Returns:
               Payments ordered by payment date
          """
          return self._active(uow).filter(
               self.model.invoice_id == invoice_id
          ).order_by(self.model.payment_date).all()

     def total_paid(self, uow: UnitOfWork, invoice_id: Any) -> Decimal:
          """
          Sum of amount_paid over the active payments of an invoice.

          Summed in Python so the result is exact on every backend.
          """
          return sum(
               (Decimal(str(payment.amount_paid)) for payment in self.get_by_invoice_id(uow, invoice_id)),
               Decimal("0"),
          )
