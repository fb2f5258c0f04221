from decimal import Decimal

from sqlalchemy import Column, Integer, String, Numeric, ForeignKey, Uuid
from sqlalchemy.orm import relationship
from .base import Base, SoftDeleteMixin


class InvoiceItem(SoftDeleteMixin, Base):
     """
     Invoice line item. Its total is informational; the owning invoice's
     total_amount is never recomputed from items.
     """
     __tablename__ = "invoice_items"

     invoice_id = Column(
          Uuid,
          ForeignKey("invoices.id"),
          nullable=False,
          index=True
     )
     description = Column(String(500), nullable=False)
     quantity = Column(Integer, nullable=False)
     unit_price = Column(Numeric(18, 2), nullable=False)
     tax_rate = Column(Numeric(5, 2), nullable=True)  # stored only, never applied
     total = Column(Numeric(18, 2), nullable=False)
     sort_order = Column(Integer, nullable=True)

     invoice = relationship("Invoice", back_populates="items")

     def __repr__(self):
          return f"<InvoiceItem(id={self.id}, description='{self.description}', total={self.total})>"

     def compute_total(self) -> Decimal:
          """Set and return the line total (quantity x unit price)."""
          self.total = Decimal(self.quantity) * Decimal(self.unit_price)
          return self.total
