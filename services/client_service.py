"""
Client Service - client management.
"""
import logging
from typing import Any, Callable, List, Optional

from models import Client
from repositories import ClientRepository
from unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class ClientService:
     """Service class for client CRUD operations."""

     def __init__(
          self,
          unit_of_work_factory: Callable[[], UnitOfWork],
          client_repository: Optional[ClientRepository] = None,
     ):
          self._unit_of_work_factory = unit_of_work_factory
          self._clients = client_repository or ClientRepository()

     def get_all_clients(self) -> List[Client]:
          logger.info("Getting all clients")
          with self._unit_of_work_factory() as uow:
               return self._clients.get_all(uow)

     def get_client_by_id(self, client_id: Any) -> Optional[Client]:
          logger.info("Getting client by ID: %s", client_id)
          with self._unit_of_work_factory() as uow:
               return self._clients.get_by_id(uow, client_id)

     def create_client(self, client: Client) -> Client:
          logger.info("Creating client: %s", client.name)
          with self._unit_of_work_factory() as uow:
               try:
                    uow.begin()
                    result = self._clients.create(uow, client)
                    uow.commit()
               except Exception:
                    logger.error("Error creating client %s", client.name, exc_info=True)
                    if uow.in_transaction:
                         uow.rollback()
                    raise

          logger.info("Client %s created successfully", result.id)
          return result

     def update_client(self, client: Client) -> bool:
          logger.info("Updating client: %s", client.id)
          with self._unit_of_work_factory() as uow:
               try:
                    uow.begin()
                    result = self._clients.update(uow, client)
                    uow.commit()
               except Exception:
                    logger.error("Error updating client %s", client.id, exc_info=True)
                    if uow.in_transaction:
                         uow.rollback()
                    raise

          if not result:
               logger.warning("Client %s not found when attempting to update", client.id)
          return result

     def delete_client(self, client_id: Any) -> bool:
          """Soft-delete a client. Invoices issued to it are not touched."""
          logger.info("Deleting client: %s", client_id)
          with self._unit_of_work_factory() as uow:
               try:
                    uow.begin()
                    result = self._clients.delete(uow, client_id)
                    uow.commit()
               except Exception:
                    logger.error("Error deleting client %s", client_id, exc_info=True)
                    if uow.in_transaction:
                         uow.rollback()
                    raise

          if not result:
               logger.warning("Client %s not found when attempting to delete", client_id)
          return result
