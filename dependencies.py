"""
Dependency injection providers for FastAPI.

Each request gets services bound to a unit-of-work factory; every service
call then opens its own unit of work, so nothing transactional is shared
between requests. Tests override get_unit_of_work_factory.
"""
from functools import partial
from typing import Callable

from fastapi import Depends

from database import SessionLocal
from services import ClientService, InvoiceService, PaymentService
from unit_of_work import UnitOfWork


def get_unit_of_work_factory() -> Callable[[], UnitOfWork]:
     """
     Factory function for creating units of work on the application database.

     Returns:
          Callable returning a new UnitOfWork
     """
     return partial(UnitOfWork, SessionLocal)


def get_client_service(
     unit_of_work_factory: Callable[[], UnitOfWork] = Depends(get_unit_of_work_factory),
) -> ClientService:
     return ClientService(unit_of_work_factory)


def get_invoice_service(
     unit_of_work_factory: Callable[[], UnitOfWork] = Depends(get_unit_of_work_factory),
) -> InvoiceService:
     return InvoiceService(unit_of_work_factory)


def get_payment_service(
     unit_of_work_factory: Callable[[], UnitOfWork] = Depends(get_unit_of_work_factory),
) -> PaymentService:
     return PaymentService(unit_of_work_factory)
