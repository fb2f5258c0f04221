"""
Invoice API routes.

Provides CRUD operations for invoices, the explicit status override and
balance reporting. Payment-driven status changes happen in the payment routes.
"""
from typing import List
from uuid import UUID
from fastapi import APIRouter, Depends, Response, status

from dependencies import get_invoice_service, get_payment_service
from exceptions import InvoiceNotFoundError
from models import Invoice, InvoiceItem
from schemas.invoice import (
     InvoiceCreate,
     InvoiceUpdate,
     InvoiceStatusUpdate,
     InvoiceResponse,
     InvoiceBalanceResponse,
)
from schemas.payment import PaymentResponse
from services import InvoiceService, PaymentService

router = APIRouter(prefix="/api/invoices", tags=["invoices"])


@router.post(
     "",
     response_model=InvoiceResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Create a new invoice"
)
def create_invoice(
     invoice_data: InvoiceCreate,
     service: InvoiceService = Depends(get_invoice_service),
):
     """
     Create a new invoice with its line items.

     - **currency**: 3-letter uppercase code
     - **due_date**: must be on or after **issue_date**
     - **total_amount**: stored as given; not recomputed from items
     """
     fields = invoice_data.model_dump(exclude={"items"})
     invoice = Invoice(
          **fields,
          items=[InvoiceItem(**item.model_dump()) for item in invoice_data.items],
     )
     return service.create_invoice(invoice)


@router.get("", response_model=List[InvoiceResponse], summary="List all invoices")
def list_invoices(service: InvoiceService = Depends(get_invoice_service)):
     return service.get_all_invoices()


@router.get("/{invoice_id}", response_model=InvoiceResponse, summary="Get invoice by ID")
def get_invoice(invoice_id: UUID, service: InvoiceService = Depends(get_invoice_service)):
     invoice = service.get_invoice_by_id(invoice_id)
     if invoice is None:
          raise InvoiceNotFoundError(invoice_id)
     return invoice


@router.put("/{invoice_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Update an invoice")
def update_invoice(
     invoice_id: UUID,
     invoice_data: InvoiceUpdate,
     service: InvoiceService = Depends(get_invoice_service),
):
     if not service.update_invoice(Invoice(id=invoice_id, **invoice_data.model_dump())):
          raise InvoiceNotFoundError(invoice_id)
     return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{invoice_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete an invoice")
def delete_invoice(invoice_id: UUID, service: InvoiceService = Depends(get_invoice_service)):
     if not service.delete_invoice(invoice_id):
          raise InvoiceNotFoundError(invoice_id)
     return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch(
     "/{invoice_id}/status",
     status_code=status.HTTP_204_NO_CONTENT,
     summary="Override invoice status"
)
def update_invoice_status(
     invoice_id: UUID,
     body: InvoiceStatusUpdate,
     service: InvoiceService = Depends(get_invoice_service),
):
     """Set the status directly (e.g. Cancelled, Disputed), bypassing reconciliation."""
     if not service.update_invoice_status(invoice_id, body.status):
          raise InvoiceNotFoundError(invoice_id)
     return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
     "/{invoice_id}/payments",
     response_model=List[PaymentResponse],
     summary="List payments applied to an invoice"
)
def list_invoice_payments(
     invoice_id: UUID,
     service: PaymentService = Depends(get_payment_service),
):
     return service.get_payments_by_invoice_id(invoice_id)


@router.get(
     "/{invoice_id}/balance",
     response_model=InvoiceBalanceResponse,
     summary="Paid and outstanding amounts"
)
def get_invoice_balance(invoice_id: UUID, service: InvoiceService = Depends(get_invoice_service)):
     balance = service.get_invoice_balance(invoice_id)
     if balance is None:
          raise InvoiceNotFoundError(invoice_id)
     return balance
