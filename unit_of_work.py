"""
Unit of Work - one session, at most one open transaction.

A unit of work is acquired for the duration of a single operation and
released on exit:

     with UnitOfWork(SessionLocal) as uow:
          uow.begin()
          payments.create(uow, payment)
          invoices.update(uow, invoice)
          uow.commit()

Leaving the block with a transaction still open (exception, cancellation
or a forgotten commit) rolls it back, and the session is always closed.
Instances must not be shared between concurrent operations.
"""
import logging
from typing import Callable, Optional

from sqlalchemy.orm import Session, SessionTransaction

from exceptions import UnitOfWorkStateError

logger = logging.getLogger(__name__)


class UnitOfWork:
     """Owns one SQLAlchemy session and the transaction bounding a group of writes."""

     def __init__(self, session_factory: Callable[[], Session]):
          """
          Initialize the unit of work.

          Args:
               session_factory: Callable returning a new Session (e.g. a sessionmaker)
          """
          self._session_factory = session_factory
          self._session: Optional[Session] = None
          self._transaction: Optional[SessionTransaction] = None

     @property
     def session(self) -> Session:
          """The session repositories execute against; opened on first use."""
          if self._session is None:
               self._session = self._session_factory()
          return self._session

     @property
     def current_transaction(self) -> Optional[SessionTransaction]:
          return self._transaction

     @property
     def in_transaction(self) -> bool:
          return self._transaction is not None

     def begin(self, isolation_level: Optional[str] = None) -> SessionTransaction:
          """
          Start a transaction.

          Args:
               isolation_level: Isolation level for this transaction only
                    (e.g. "SERIALIZABLE"). None keeps the engine default,
                    which is READ COMMITTED unless configured otherwise.

          Returns:
               The active SessionTransaction

          Raises:
               UnitOfWorkStateError: If a transaction is already open
          """
          if self._transaction is not None:
               raise UnitOfWorkStateError("begin", "Transaction already started")

          session = self.session
          if session.in_transaction():
               # Reads issued before begin() autobegan a transaction; end it
               # so the explicit one starts on a clean connection.
               session.rollback()

          self._transaction = session.begin()
          if isolation_level is not None:
               session.connection(execution_options={"isolation_level": isolation_level})
          return self._transaction

     def commit(self) -> None:
          """
          Commit the open transaction.

          Raises:
               UnitOfWorkStateError: If no transaction is open
          """
          transaction = self._require_transaction("commit")
          try:
               transaction.commit()
          except BaseException:
               # The failed transaction is still bound to the session
               self.session.rollback()
               raise
          finally:
               self._transaction = None

     def rollback(self) -> None:
          """
          Roll back the open transaction.

          Raises:
               UnitOfWorkStateError: If no transaction is open
          """
          transaction = self._require_transaction("rollback")
          try:
               transaction.rollback()
          finally:
               self._transaction = None

     def close(self) -> None:
          """Roll back anything uncommitted and release the connection."""
          try:
               if self._transaction is not None:
                    self.rollback()
          finally:
               if self._session is not None:
                    self._session.close()
                    self._session = None

     def _require_transaction(self, operation: str) -> SessionTransaction:
          if self._transaction is None:
               raise UnitOfWorkStateError(operation, f"No active transaction to {operation}")
          return self._transaction

     def __enter__(self) -> "UnitOfWork":
          return self

     def __exit__(self, exc_type, exc_value, traceback) -> None:
          if self._transaction is not None and exc_type is None:
               logger.warning("Unit of work closed with an uncommitted transaction; rolling back")
          self.close()
