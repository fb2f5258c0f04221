import re
import uuid
from datetime import datetime, timezone

from sqlalchemy import Boolean, Column, DateTime, Uuid
from sqlalchemy.orm import DeclarativeBase, declared_attr


def utcnow() -> datetime:
     return datetime.now(timezone.utc)


class Base(DeclarativeBase):
     """
     Base class for all SQLAlchemy models.
     Provides common configuration and mixins.
     """

     @declared_attr.directive
     def __tablename__(cls) -> str:
          """
          Automatically generate table name from class name.
          Example: InvoiceItem -> invoice_items
          """
          name = re.sub(r'(?<!^)(?=[A-Z])', '_', cls.__name__).lower()
          # Pluralize (simple version)
          if name.endswith('y'):
               return name[:-1] + 'ies'
          elif name.endswith('s'):
               return name + 'es'
          return name + 's'


class SoftDeleteMixin:
     """
     Identity, timestamps and the soft-delete flag shared by every entity.

     Rows are never physically removed; deleting sets is_deleted and
     updated_at. Repositories exclude is_deleted rows from every read.
     """

     id = Column(Uuid, primary_key=True, default=uuid.uuid4)
     created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
     updated_at = Column(DateTime(timezone=True), nullable=True)
     is_deleted = Column(Boolean, default=False, nullable=False, index=True)

     def mark_deleted(self) -> None:
          """Soft-delete the row."""
          self.is_deleted = True
          self.updated_at = utcnow()
