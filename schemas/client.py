"""
Pydantic schemas for Client API request/response validation.
"""
from datetime import datetime
from typing import Optional
from uuid import UUID
from pydantic import BaseModel, Field, ConfigDict

PHONE_PATTERN = r"^\+?[0-9\s\-]{7,20}$"
EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class ClientCreate(BaseModel):
     """Schema for creating a new client."""
     name: str = Field(..., min_length=1, max_length=200)
     email: str = Field(..., max_length=200, pattern=EMAIL_PATTERN)
     company_name: Optional[str] = Field(None, max_length=200)
     address: Optional[str] = Field(None, max_length=500)
     phone_number: Optional[str] = Field(None, max_length=20, pattern=PHONE_PATTERN)

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "name": "Jane Doe",
                    "email": "jane@example.com",
                    "company_name": "Acme Corp",
                    "phone_number": "+1 555-0100"
               }
          }
     )


class ClientUpdate(ClientCreate):
     """Schema for updating an existing client (full replacement)."""


class ClientResponse(BaseModel):
     """Schema for client response."""
     id: UUID
     name: str
     email: str
     company_name: Optional[str] = None
     address: Optional[str] = None
     phone_number: Optional[str] = None
     created_at: datetime
     updated_at: Optional[datetime] = None

     model_config = ConfigDict(from_attributes=True)
