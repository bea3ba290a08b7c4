"""
Owner Request DTOs

DTOs for owner-related API requests.
"""

from pydantic import BaseModel, Field
from typing import Optional

from models import Owner
from constants import OwnerFieldLength


class OwnerCreateRequest(BaseModel):
    """
    Request DTO for creating an owner.

    Every field is optional; only the column lengths are enforced.
    """

    first_name: Optional[str] = Field(None, max_length=OwnerFieldLength.FIRST_NAME, description="First name")
    last_name: Optional[str] = Field(None, max_length=OwnerFieldLength.LAST_NAME, description="Last name")
    address: Optional[str] = Field(None, max_length=OwnerFieldLength.ADDRESS, description="Street address")
    city: Optional[str] = Field(None, max_length=OwnerFieldLength.CITY, description="City")
    telephone: Optional[str] = Field(None, max_length=OwnerFieldLength.TELEPHONE, description="Telephone number")

    def to_model(self, owner_id: Optional[int] = None) -> Owner:
        """Build an Owner from this request, with every field set (None included)."""
        return Owner(id=owner_id, **self.model_dump())


class OwnerUpdateRequest(OwnerCreateRequest):
    """
    Request DTO for replacing an owner.

    Fields left out of the body are stored as null.
    """
