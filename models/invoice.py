import enum
from decimal import Decimal

from sqlalchemy import Column, String, Numeric, DateTime, ForeignKey, Enum, Uuid
from sqlalchemy.orm import relationship
from .base import Base, SoftDeleteMixin


class InvoiceStatus(str, enum.Enum):
     """
     Enumeration for invoice status.

     Reconciliation only ever produces SENT, PARTIALLY_PAID or PAID.
     CANCELLED and DISPUTED are set explicitly and never derived.
     """
     DRAFT = "Draft"
     SENT = "Sent"
     OVERDUE = "Overdue"
     PARTIALLY_PAID = "PartiallyPaid"
     PAID = "Paid"
     CANCELLED = "Cancelled"
     DISPUTED = "Disputed"


EXOGENOUS_STATUSES = frozenset({InvoiceStatus.CANCELLED, InvoiceStatus.DISPUTED})


def derive_status(total_paid: Decimal, total_amount: Decimal) -> InvoiceStatus:
     """
     Status an invoice must carry given the sum of its active payments.

     Overpayment counts as paid; zero never reverts to DRAFT.
     """
     if total_paid >= total_amount:
          return InvoiceStatus.PAID
     if total_paid > 0:
          return InvoiceStatus.PARTIALLY_PAID
     return InvoiceStatus.SENT


class Invoice(SoftDeleteMixin, Base):
     """
     Invoice model - billing record issued to a client.

     total_amount is stored independently of the line items and is the
     figure payments are reconciled against. Payments are not mapped as a
     relationship; they are read by invoice id through the payment
     repository so the soft-delete filter always applies.
     """
     __tablename__ = "invoices"

     # Foreign keys
     client_id = Column(
          Uuid,
          ForeignKey("clients.id"),
          nullable=False,
          index=True
     )

     # Invoice details
     invoice_number = Column(String(50), nullable=False)
     issue_date = Column(DateTime(timezone=True), nullable=False)
     due_date = Column(DateTime(timezone=True), nullable=False)
     currency = Column(String(3), nullable=False)
     total_amount = Column(Numeric(18, 2), nullable=False, default=Decimal("0"))
     notes = Column(String(1000), nullable=True)
     status = Column(
          Enum(
               InvoiceStatus,
               name="invoice_status",
               create_constraint=True,
               length=20,
               values_callable=lambda statuses: [s.value for s in statuses],
          ),
          default=InvoiceStatus.DRAFT,
          nullable=False,
          index=True
     )

     # Relationships
     items = relationship(
          "InvoiceItem",
          back_populates="invoice",
          cascade="all, delete-orphan",
          order_by="InvoiceItem.sort_order",
          lazy="selectin",
     )

     def __repr__(self):
          return f"<Invoice(id={self.id}, number='{self.invoice_number}', total={self.total_amount}, status='{self.status}')>"

     def update_status_from_payments(self, total_paid: Decimal) -> InvoiceStatus:
          """Re-derive the status from the sum of active payments."""
          self.status = derive_status(total_paid, self.total_amount)
          return self.status
