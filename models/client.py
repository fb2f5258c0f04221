from sqlalchemy import Column, String
from .base import Base, SoftDeleteMixin


class Client(SoftDeleteMixin, Base):
     """
     Client model - the party invoices are issued to.
     Invoices reference clients by id only; deleting a client does not
     touch its invoices.
     """
     __tablename__ = "clients"

     name = Column(String(200), nullable=False)
     email = Column(String(200), nullable=False)
     company_name = Column(String(200), nullable=True)
     address = Column(String(500), nullable=True)
     phone_number = Column(String(20), nullable=True)

     def __repr__(self):
          return f"<Client(id={self.id}, name='{self.name}')>"
