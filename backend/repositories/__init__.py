"""
Repository layer for data access abstraction.

This package contains repository classes that encapsulate database queries
and provide a clean interface for data access operations.
"""

from .owner_repository import IOwnerRepository, OwnerRepository

__all__ = [
    "IOwnerRepository",
    "OwnerRepository",
]
