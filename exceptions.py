"""
Custom exception classes for the billing service.

Store failures are not wrapped: repositories and services let
SQLAlchemy errors propagate unchanged, so callers catch StoreFailure
(an alias of SQLAlchemyError) for those.
"""
from typing import Any, Optional

from sqlalchemy.exc import SQLAlchemyError

StoreFailure = SQLAlchemyError


class BillingError(Exception):
     """Base exception for all billing errors"""

     def __init__(self, message: str, details: Optional[dict] = None):
          self.message = message
          self.details = details or {}
          super().__init__(self.message)


class NotFoundError(BillingError):
     """Raised when a referenced entity does not exist or is soft-deleted"""

     entity = "Entity"

     def __init__(self, entity_id: Any, message: Optional[str] = None):
          self.entity_id = entity_id
          msg = message or f"{self.entity} with ID {entity_id} not found"
          super().__init__(msg, {"entity": self.entity, "entity_id": str(entity_id)})


class ClientNotFoundError(NotFoundError):
     entity = "Client"


class InvoiceNotFoundError(NotFoundError):
     entity = "Invoice"


class PaymentNotFoundError(NotFoundError):
     entity = "Payment"


class UnitOfWorkStateError(BillingError):
     """Raised when a unit of work is misused (double begin, commit without begin)"""

     def __init__(self, operation: str, message: str):
          super().__init__(message, {"operation": operation})
