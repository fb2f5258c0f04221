import enum

from sqlalchemy import Column, String, Numeric, DateTime, ForeignKey, Enum, Uuid
from .base import Base, SoftDeleteMixin


class PaymentMethod(str, enum.Enum):
     """Enumeration for the way a payment was made."""
     BANK_TRANSFER = "BankTransfer"
     CREDIT_CARD = "CreditCard"
     CASH = "Cash"
     CHECK = "Check"
     PAYPAL = "PayPal"
     OTHER = "Other"


class Payment(SoftDeleteMixin, Base):
     """
     Payment model - an amount applied against an invoice.

     Writes go through the payment service so the owning invoice's status
     is recomputed in the same transaction.
     """
     __tablename__ = "payments"

     invoice_id = Column(
          Uuid,
          ForeignKey("invoices.id"),
          nullable=False,
          index=True
     )
     amount_paid = Column(Numeric(18, 2), nullable=False)
     payment_date = Column(DateTime(timezone=True), nullable=False)
     payment_method = Column(
          Enum(
               PaymentMethod,
               name="payment_method",
               create_constraint=True,
               length=100,
               values_callable=lambda methods: [m.value for m in methods],
          ),
          default=PaymentMethod.BANK_TRANSFER,
          nullable=False
     )
     reference_number = Column(String(100), nullable=True)
     notes = Column(String(1000), nullable=True)

     def __repr__(self):
          return f"<Payment(id={self.id}, invoice_id={self.invoice_id}, amount={self.amount_paid})>"
