"""
Base repository providing common CRUD operations over soft-deletable models.
"""

import uuid
from typing import Any, Generic, List, Optional, Tuple, Type, TypeVar
from sqlalchemy.orm import Query

from models.base import utcnow
from unit_of_work import UnitOfWork

T = TypeVar('T')


class BaseRepository(Generic[T]):
     """
     Generic base repository providing common CRUD operations.
     All specific repositories should inherit from this class.

     Repositories hold no session of their own: every call receives the
     unit of work of the operation it belongs to, and writes join whatever
     transaction that unit of work has open. Store errors are never caught
     here.
     """

     # Fields copied from the caller's entity on update
     mutable_fields: Tuple[str, ...] = ()

     def __init__(self, model: Type[T]):
          """
          Initialize the repository.

          Args:
               model: SQLAlchemy model class
          """
          self.model = model

     def _active(self, uow: UnitOfWork) -> Query:
          """Query over rows that are not soft-deleted. Every read starts here."""
          return uow.session.query(self.model).filter(self.model.is_deleted.is_(False))

     def get_all(self, uow: UnitOfWork) -> List[T]:
          """
          Retrieve all active records.

          Args:
               uow: Unit of work of the current operation

          Returns:
               List of model instances
          """
          return self._active(uow).order_by(self.model.created_at).all()

     def get_by_id(self, uow: UnitOfWork, id: Any) -> Optional[T]:
          """
          Retrieve an active record by its ID.

          Args:
               uow: Unit of work of the current operation
               id: Primary key value

          Returns:
               Model instance or None if not found or soft-deleted
          """
          return self._active(uow).filter(self.model.id == id).first()

     def create(self, uow: UnitOfWork, obj: T) -> T:
          """
          Persist a new record.

          The creation timestamp is always assigned here; an ID is generated
          when the caller did not supply one.

          Args:
               uow: Unit of work of the current operation
               obj: Model instance to create

          Returns:
               Created model instance
          """
          if obj.id is None:
               obj.id = uuid.uuid4()
          obj.created_at = utcnow()
          obj.is_deleted = False
          uow.session.add(obj)
          uow.session.flush()
          return obj

     def update(self, uow: UnitOfWork, obj: T) -> bool:
          """
          Overwrite the mutable fields of an existing active record.

          Args:
               uow: Unit of work of the current operation
               obj: Model instance carrying the ID and the new values

          Returns:
               True if updated, False if no active record has that ID
          """
          existing = self.get_by_id(uow, obj.id)
          if existing is None:
               return False

          if existing is not obj:
               for field in self.mutable_fields:
                    setattr(existing, field, getattr(obj, field))
          existing.updated_at = utcnow()
          uow.session.flush()
          return True

     def delete(self, uow: UnitOfWork, id: Any) -> bool:
          """
          Soft-delete a record by its ID.

          Args:
               uow: Unit of work of the current operation
               id: Primary key value

          Returns:
               True if deleted, False if not found or already deleted
          """
          existing = self.get_by_id(uow, id)
          if existing is None:
               return False

          existing.mark_deleted()
          uow.session.flush()
          return True
