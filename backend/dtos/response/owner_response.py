"""
Owner Response DTOs

DTOs for owner-related API responses.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class OwnerResponse(BaseModel):
    """Response DTO for a stored owner."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(description="Owner ID")
    first_name: Optional[str] = Field(None, description="First name")
    last_name: Optional[str] = Field(None, description="Last name")
    address: Optional[str] = Field(None, description="Street address")
    city: Optional[str] = Field(None, description="City")
    telephone: Optional[str] = Field(None, description="Telephone number")
