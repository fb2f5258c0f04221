"""
Client repository for client-specific data access operations.
"""

from models import Client
from .base_repository import BaseRepository


class ClientRepository(BaseRepository[Client]):
     """Repository for Client model operations."""

     mutable_fields = ("name", "email", "company_name", "address", "phone_number")

     def __init__(self):
          super().__init__(Client)
