"""
Payment API routes.

Every write goes through PaymentService, which reconciles the owning
invoice's status in the same transaction as the payment itself.
"""
from typing import List
from uuid import UUID
from fastapi import APIRouter, Depends, Response, status

from dependencies import get_payment_service
from exceptions import PaymentNotFoundError
from models import Payment
from schemas.payment import PaymentCreate, PaymentUpdate, PaymentResponse
from services import PaymentService

router = APIRouter(prefix="/api/payments", tags=["payments"])


@router.post(
     "",
     response_model=PaymentResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Record a payment"
)
def create_payment(
     body: PaymentCreate,
     service: PaymentService = Depends(get_payment_service),
):
     """
     Record a payment against an invoice.

     The invoice becomes **PartiallyPaid** or **Paid** depending on the sum of
     its payments. A missing invoice yields 404 and nothing is stored.
     """
     return service.create_payment(Payment(**body.model_dump()))


@router.get("", response_model=List[PaymentResponse], summary="List all payments")
def list_payments(service: PaymentService = Depends(get_payment_service)):
     return service.get_all_payments()


@router.get("/{payment_id}", response_model=PaymentResponse, summary="Get payment by ID")
def get_payment(payment_id: UUID, service: PaymentService = Depends(get_payment_service)):
     payment = service.get_payment_by_id(payment_id)
     if payment is None:
          raise PaymentNotFoundError(payment_id)
     return payment


@router.put("/{payment_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Update a payment")
def update_payment(
     payment_id: UUID,
     body: PaymentUpdate,
     service: PaymentService = Depends(get_payment_service),
):
     if not service.update_payment(Payment(id=payment_id, **body.model_dump())):
          raise PaymentNotFoundError(payment_id)
     return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{payment_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete a payment")
def delete_payment(payment_id: UUID, service: PaymentService = Depends(get_payment_service)):
     if not service.delete_payment(payment_id):
          raise PaymentNotFoundError(payment_id)
     return Response(status_code=status.HTTP_204_NO_CONTENT)
