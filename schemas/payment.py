"""
Pydantic schemas for Payment API request/response validation.
"""
from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID
from pydantic import BaseModel, Field, ConfigDict

from models.payment import PaymentMethod


class PaymentCreate(BaseModel):
     """Request body for recording a payment."""

     invoice_id: UUID = Field(..., description="Invoice the payment is applied to")
     amount_paid: Decimal = Field(..., gt=0, max_digits=18, decimal_places=2)
     payment_date: Optional[datetime] = Field(None, description="Defaults to now")
     payment_method: PaymentMethod = PaymentMethod.BANK_TRANSFER
     reference_number: Optional[str] = Field(None, max_length=100)
     notes: Optional[str] = Field(None, max_length=1000)

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "invoice_id": "0b7e9c1d-3a55-4f0e-8c4e-1d2a3b4c5d6e",
                    "amount_paid": 100.00,
                    "payment_method": "BankTransfer",
                    "reference_number": "TX-20261019-001",
               }
          }
     )


class PaymentUpdate(PaymentCreate):
     """Request body for updating a payment (full replacement)."""


class PaymentResponse(BaseModel):
     """Response for a stored payment."""

     id: UUID
     invoice_id: UUID
     amount_paid: Decimal
     payment_date: datetime
     payment_method: PaymentMethod
     reference_number: Optional[str] = None
     notes: Optional[str] = None
     created_at: datetime
     updated_at: Optional[datetime] = None

     model_config = ConfigDict(from_attributes=True)
