"""
Payment Service - payment writes and invoice reconciliation.

Every payment create, update or delete runs in one transaction together
with the recomputation of the owning invoice's status, so no committed
state ever shows a payment without its matching invoice status.
"""
import logging
from typing import Any, Callable, List, Optional

from exceptions import InvoiceNotFoundError
from models import Invoice, Payment, InvoiceStatus
from models.base import utcnow
from models.invoice import EXOGENOUS_STATUSES
from repositories import InvoiceRepository, PaymentRepository
from unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class PaymentService:
     """Service class for payment operations and invoice status reconciliation."""

     def __init__(
          self,
          unit_of_work_factory: Callable[[], UnitOfWork],
          payment_repository: Optional[PaymentRepository] = None,
          invoice_repository: Optional[InvoiceRepository] = None,
          isolation_level: Optional[str] = None,
     ):
          """
          Args:
               unit_of_work_factory: Returns a fresh UnitOfWork per operation
               payment_repository: Defaults to a new PaymentRepository
               invoice_repository: Defaults to a new InvoiceRepository
               isolation_level: Isolation level for write transactions; None
                    uses the engine default. Use "SERIALIZABLE" where
                    concurrent payments on one invoice must not race.
          """
          self._unit_of_work_factory = unit_of_work_factory
          self._payments = payment_repository or PaymentRepository()
          self._invoices = invoice_repository or InvoiceRepository()
          self.isolation_level = isolation_level

     def get_all_payments(self) -> List[Payment]:
          logger.info("Getting all payments")
          with self._unit_of_work_factory() as uow:
               return self._payments.get_all(uow)

     def get_payment_by_id(self, payment_id: Any) -> Optional[Payment]:
          logger.info("Getting payment by ID: %s", payment_id)
          with self._unit_of_work_factory() as uow:
               return self._payments.get_by_id(uow, payment_id)

     def get_payments_by_invoice_id(self, invoice_id: Any) -> List[Payment]:
          logger.info("Getting payments by invoice ID: %s", invoice_id)
          with self._unit_of_work_factory() as uow:
               return self._payments.get_by_invoice_id(uow, invoice_id)

     def create_payment(self, payment: Payment) -> Payment:
          """
          Record a payment and reconcile its invoice.

          Args:
               payment: Payment to create; payment_date defaults to now

          Returns:
               The created payment with its assigned ID

          Raises:
               InvoiceNotFoundError: If the invoice does not exist or is deleted
          """
          logger.info(
               "Creating payment for invoice %s with amount %s",
               payment.invoice_id, payment.amount_paid
          )
          with self._unit_of_work_factory() as uow:
               try:
                    uow.begin(self.isolation_level)

                    invoice = self._invoices.get_by_id(uow, payment.invoice_id)
                    if invoice is None:
                         raise InvoiceNotFoundError(payment.invoice_id)

                    if payment.payment_date is None:
                         payment.payment_date = utcnow()

                    result = self._payments.create(uow, payment)
                    self._reconcile(uow, invoice)

                    uow.commit()
               except Exception:
                    logger.error(
                         "Error creating payment for invoice %s",
                         payment.invoice_id, exc_info=True
                    )
                    if uow.in_transaction:
                         uow.rollback()
                    raise

          logger.info("Payment %s created successfully", result.id)
          return result

     def update_payment(self, payment: Payment) -> bool:
          """
          Update a payment and reconcile the invoice(s) it belongs to.

          A payment_date left unset keeps the stored date. Moving a payment
          to another invoice reconciles both invoices.

          Returns:
               True if updated, False if the payment does not exist

          Raises:
               InvoiceNotFoundError: If the payment is moved to an invoice that
                    does not exist or is deleted
          """
          logger.info("Updating payment: %s", payment.id)
          with self._unit_of_work_factory() as uow:
               try:
                    uow.begin(self.isolation_level)

                    existing = self._payments.get_by_id(uow, payment.id)
                    if existing is None:
                         logger.warning("Payment %s not found when attempting to update", payment.id)
                         uow.rollback()
                         return False

                    previous_invoice_id = existing.invoice_id
                    if payment.invoice_id != previous_invoice_id:
                         if self._invoices.get_by_id(uow, payment.invoice_id) is None:
                              raise InvoiceNotFoundError(payment.invoice_id)

                    if payment.payment_date is None:
                         payment.payment_date = existing.payment_date

                    result = self._payments.update(uow, payment)

                    # dict.fromkeys keeps order and drops the duplicate
                    for invoice_id in dict.fromkeys([previous_invoice_id, existing.invoice_id]):
                         invoice = self._invoices.get_by_id(uow, invoice_id)
                         if invoice is not None:
                              self._reconcile(uow, invoice)

                    uow.commit()
               except Exception:
                    logger.error("Error updating payment %s", payment.id, exc_info=True)
                    if uow.in_transaction:
                         uow.rollback()
                    raise

          logger.info("Payment %s updated successfully", payment.id)
          return result

     def delete_payment(self, payment_id: Any) -> bool:
          """
          Soft-delete a payment and reconcile its invoice.

          Returns:
               True if deleted, False if the payment does not exist
          """
          logger.info("Deleting payment: %s", payment_id)
          with self._unit_of_work_factory() as uow:
               try:
                    uow.begin(self.isolation_level)

                    payment = self._payments.get_by_id(uow, payment_id)
                    if payment is None:
                         logger.warning("Payment %s not found when attempting to delete", payment_id)
                         uow.rollback()
                         return False

                    invoice_id = payment.invoice_id
                    result = self._payments.delete(uow, payment_id)

                    invoice = self._invoices.get_by_id(uow, invoice_id)
                    if invoice is not None:
                         self._reconcile(uow, invoice)

                    uow.commit()
               except Exception:
                    logger.error("Error deleting payment %s", payment_id, exc_info=True)
                    if uow.in_transaction:
                         uow.rollback()
                    raise

          logger.info("Payment %s deleted successfully", payment_id)
          return result

     def _reconcile(self, uow: UnitOfWork, invoice: Invoice) -> InvoiceStatus:
          """
          Recompute an invoice's status from its active payments and persist it.

          Must run inside the transaction that wrote the payment. Cancelled
          and disputed invoices keep their status.
          """
          if invoice.status in EXOGENOUS_STATUSES:
               logger.info(
                    "Invoice %s is %s; status left unchanged",
                    invoice.id, invoice.status.value
               )
               return invoice.status

          total_paid = self._payments.total_paid(uow, invoice.id)
          status = invoice.update_status_from_payments(total_paid)
          self._invoices.update(uow, invoice)
          logger.info(
               "Invoice %s marked as %s (paid %s of %s)",
               invoice.id, status.value, total_paid, invoice.total_amount
          )
          return status
