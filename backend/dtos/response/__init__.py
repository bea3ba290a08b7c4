"""
Response DTOs

DTOs for outgoing API responses. These control exactly which owner fields
the API exposes.
"""

from .owner_response import OwnerResponse

__all__ = ["OwnerResponse"]
