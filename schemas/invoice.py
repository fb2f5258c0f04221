"""
Pydantic schemas for Invoice API request/response validation.
"""
from datetime import datetime
from decimal import Decimal
from typing import Optional, List
from uuid import UUID
from pydantic import BaseModel, Field, ConfigDict, model_validator

from models.invoice import InvoiceStatus


class InvoiceItemCreate(BaseModel):
     """Schema for a line item submitted with a new invoice."""
     description: str = Field(..., min_length=1, max_length=500)
     quantity: int = Field(..., gt=0)
     unit_price: Decimal = Field(..., ge=0, max_digits=18, decimal_places=2)
     tax_rate: Optional[Decimal] = Field(None, ge=0, max_digits=5, decimal_places=2)
     sort_order: Optional[int] = None


class InvoiceItemResponse(BaseModel):
     id: UUID
     description: str
     quantity: int
     unit_price: Decimal
     tax_rate: Optional[Decimal] = None
     total: Decimal
     sort_order: Optional[int] = None

     model_config = ConfigDict(from_attributes=True)


class InvoiceBase(BaseModel):
     client_id: UUID
     invoice_number: str = Field(..., min_length=1, max_length=50)
     issue_date: datetime
     due_date: datetime
     currency: str = Field(..., pattern=r"^[A-Z]{3}$", description="3-letter ISO code (e.g., USD)")
     total_amount: Decimal = Field(..., ge=0, max_digits=18, decimal_places=2)
     notes: Optional[str] = Field(None, max_length=1000)

     @model_validator(mode="after")
     def check_due_date(self):
          if self.due_date < self.issue_date:
               raise ValueError("Due date must be on or after the issue date")
          return self


class InvoiceCreate(InvoiceBase):
     """Schema for creating a new invoice."""
     status: InvoiceStatus = Field(default=InvoiceStatus.DRAFT, description="Initial status")
     items: List[InvoiceItemCreate] = Field(default_factory=list)

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "client_id": "6f1c2a8e-6d2e-4c43-9b51-2f7f8b5e3c11",
                    "invoice_number": "INV-2026-0001",
                    "issue_date": "2026-10-01T00:00:00Z",
                    "due_date": "2026-10-31T00:00:00Z",
                    "currency": "USD",
                    "total_amount": 200.00,
                    "items": [
                         {"description": "Consulting", "quantity": 2, "unit_price": 100.00}
                    ]
               }
          }
     )


class InvoiceUpdate(InvoiceBase):
     """Schema for updating an existing invoice (full replacement, items excluded)."""
     status: InvoiceStatus


class InvoiceStatusUpdate(BaseModel):
     """Schema for an explicit status override."""
     status: InvoiceStatus

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "status": "Cancelled"
               }
          }
     )


class InvoiceResponse(BaseModel):
     """Schema for invoice response."""
     id: UUID
     client_id: UUID
     invoice_number: str
     issue_date: datetime
     due_date: datetime
     currency: str
     total_amount: Decimal
     notes: Optional[str] = None
     status: InvoiceStatus
     items: List[InvoiceItemResponse] = []
     created_at: datetime
     updated_at: Optional[datetime] = None

     model_config = ConfigDict(from_attributes=True)


class InvoiceBalanceResponse(BaseModel):
     """Schema for the paid/outstanding summary of an invoice."""
     invoice_id: UUID
     currency: str
     total_amount: Decimal
     total_paid: Decimal
     outstanding: Decimal
     payment_count: int
     status: InvoiceStatus
