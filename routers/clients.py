"""
Client API routes.

Thin adapter over ClientService: request validation happens in the schemas,
not-found outcomes become 404 through the application's error handlers.
"""
from typing import List
from uuid import UUID
from fastapi import APIRouter, Depends, Response, status

from dependencies import get_client_service, get_invoice_service
from exceptions import ClientNotFoundError
from models import Client
from schemas.client import ClientCreate, ClientUpdate, ClientResponse
from schemas.invoice import InvoiceResponse
from services import ClientService, InvoiceService

router = APIRouter(prefix="/api/clients", tags=["clients"])


@router.post(
     "",
     response_model=ClientResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Create a new client"
)
def create_client(
     client_data: ClientCreate,
     service: ClientService = Depends(get_client_service),
):
     return service.create_client(Client(**client_data.model_dump()))


@router.get("", response_model=List[ClientResponse], summary="List all clients")
def list_clients(service: ClientService = Depends(get_client_service)):
     return service.get_all_clients()


@router.get("/{client_id}", response_model=ClientResponse, summary="Get client by ID")
def get_client(client_id: UUID, service: ClientService = Depends(get_client_service)):
     client = service.get_client_by_id(client_id)
     if client is None:
          raise ClientNotFoundError(client_id)
     return client


@router.put("/{client_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Update a client")
def update_client(
     client_id: UUID,
     client_data: ClientUpdate,
     service: ClientService = Depends(get_client_service),
):
     if not service.update_client(Client(id=client_id, **client_data.model_dump())):
          raise ClientNotFoundError(client_id)
     return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{client_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete a client")
def delete_client(client_id: UUID, service: ClientService = Depends(get_client_service)):
     if not service.delete_client(client_id):
          raise ClientNotFoundError(client_id)
     return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
     "/{client_id}/invoices",
     response_model=List[InvoiceResponse],
     summary="List a client's invoices"
)
def list_client_invoices(
     client_id: UUID,
     service: InvoiceService = Depends(get_invoice_service),
):
     return service.get_invoices_by_client_id(client_id)
