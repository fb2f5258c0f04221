"""
Invoice Service - Business logic layer for invoice operations.

This service handles invoice creation, updates, explicit status changes and
balance reporting, separate from the API layer. Status changes driven by
payments live in the payment service.
"""
import logging
from decimal import Decimal
from typing import Any, Callable, List, Optional

from models import Invoice, InvoiceStatus
from repositories import InvoiceRepository, PaymentRepository
from unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class InvoiceService:
     """Service class for invoice-related business logic."""

     def __init__(
          self,
          unit_of_work_factory: Callable[[], UnitOfWork],
          invoice_repository: Optional[InvoiceRepository] = None,
          payment_repository: Optional[PaymentRepository] = None,
     ):
          self._unit_of_work_factory = unit_of_work_factory
          self._invoices = invoice_repository or InvoiceRepository()
          self._payments = payment_repository or PaymentRepository()

     def get_all_invoices(self) -> List[Invoice]:
          logger.info("Getting all invoices")
          with self._unit_of_work_factory() as uow:
               return self._invoices.get_all(uow)

     def get_invoice_by_id(self, invoice_id: Any) -> Optional[Invoice]:
          logger.info("Getting invoice by ID: %s", invoice_id)
          with self._unit_of_work_factory() as uow:
               return self._invoices.get_by_id(uow, invoice_id)

     def get_invoices_by_client_id(self, client_id: Any) -> List[Invoice]:
          logger.info("Getting invoices by client ID: %s", client_id)
          with self._unit_of_work_factory() as uow:
               return self._invoices.get_by_client_id(uow, client_id)

     def create_invoice(self, invoice: Invoice) -> Invoice:
          """
          Create an invoice together with its line items.

          Args:
               invoice: Invoice to create; items without a total get
                    quantity x unit price

          Returns:
               Created Invoice object
          """
          logger.info(
               "Creating invoice for client %s with total amount %s",
               invoice.client_id, invoice.total_amount
          )
          if invoice.status is None:
               invoice.status = InvoiceStatus.DRAFT
          # Assigning the collection marks it loaded, so it stays readable once detached
          invoice.items = list(invoice.items)
          for position, item in enumerate(invoice.items):
               if item.total is None:
                    item.compute_total()
               if item.sort_order is None:
                    item.sort_order = position

          with self._unit_of_work_factory() as uow:
               try:
                    uow.begin()
                    result = self._invoices.create(uow, invoice)
                    uow.commit()
               except Exception:
                    logger.error("Error creating invoice for client %s", invoice.client_id, exc_info=True)
                    if uow.in_transaction:
                         uow.rollback()
                    raise

          logger.info("Invoice %s created successfully", result.id)
          return result

     def update_invoice(self, invoice: Invoice) -> bool:
          """
          Overwrite an invoice's fields.

          Returns:
               True if updated, False if the invoice does not exist
          """
          logger.info("Updating invoice: %s", invoice.id)
          with self._unit_of_work_factory() as uow:
               try:
                    uow.begin()
                    result = self._invoices.update(uow, invoice)
                    uow.commit()
               except Exception:
                    logger.error("Error updating invoice %s", invoice.id, exc_info=True)
                    if uow.in_transaction:
                         uow.rollback()
                    raise

          if result:
               logger.info("Invoice %s updated successfully", invoice.id)
          else:
               logger.warning("Invoice %s not found when attempting to update", invoice.id)
          return result

     def delete_invoice(self, invoice_id: Any) -> bool:
          """
          Soft-delete an invoice. Its items and payments are left as they are.

          Returns:
               True if deleted, False if the invoice does not exist
          """
          logger.info("Deleting invoice: %s", invoice_id)
          with self._unit_of_work_factory() as uow:
               try:
                    uow.begin()
                    result = self._invoices.delete(uow, invoice_id)
                    uow.commit()
               except Exception:
                    logger.error("Error deleting invoice %s", invoice_id, exc_info=True)
                    if uow.in_transaction:
                         uow.rollback()
                    raise

          if result:
               logger.info("Invoice %s deleted successfully", invoice_id)
          else:
               logger.warning("Invoice %s not found when attempting to delete", invoice_id)
          return result

     def update_invoice_status(self, invoice_id: Any, status: InvoiceStatus) -> bool:
          """
          Set an invoice's status directly, bypassing payment reconciliation.

          Used for CANCELLED, DISPUTED and manual corrections.

          Returns:
               True if updated, False if the invoice does not exist
          """
          logger.info("Updating invoice %s status to %s", invoice_id, status)
          with self._unit_of_work_factory() as uow:
               try:
                    uow.begin()

                    invoice = self._invoices.get_by_id(uow, invoice_id)
                    if invoice is None:
                         logger.warning("Invoice %s not found when attempting to update status", invoice_id)
                         uow.rollback()
                         return False

                    invoice.status = InvoiceStatus(status)
                    result = self._invoices.update(uow, invoice)

                    uow.commit()
               except Exception:
                    logger.error("Error updating invoice %s status to %s", invoice_id, status, exc_info=True)
                    if uow.in_transaction:
                         uow.rollback()
                    raise

          logger.info("Invoice %s status updated to %s successfully", invoice_id, status)
          return result

     def get_invoice_balance(self, invoice_id: Any) -> Optional[dict]:
          """
          Calculate how much of an invoice has been paid.

          Args:
               invoice_id: Invoice UUID

          Returns:
               Dictionary with balance information, or None if not found
          """
          with self._unit_of_work_factory() as uow:
               invoice = self._invoices.get_by_id(uow, invoice_id)
               if invoice is None:
                    return None
               payments = self._payments.get_by_invoice_id(uow, invoice_id)

          total_paid = sum((Decimal(str(p.amount_paid)) for p in payments), Decimal("0"))
          outstanding = max(Decimal(str(invoice.total_amount)) - total_paid, Decimal("0"))
          return {
               "invoice_id": invoice.id,
               "currency": invoice.currency,
               "total_amount": invoice.total_amount,
               "total_paid": total_paid,
               "outstanding": outstanding,
               "payment_count": len(payments),
               "status": invoice.status,
          }
