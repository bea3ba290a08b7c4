"""
Request DTOs

DTOs for incoming API requests. These decouple the API from database models
and define what owner data the API accepts.
"""

from .owner_request import OwnerCreateRequest, OwnerUpdateRequest

__all__ = ["OwnerCreateRequest", "OwnerUpdateRequest"]
