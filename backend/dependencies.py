"""
Dependency injection providers for FastAPI.

Factory functions that build the owner repository and service for a request's
database session. Tests override get_db to point them at a throwaway database.
"""

from sqlalchemy.orm import Session
from fastapi import Depends
from database import get_db
from repositories.owner_repository import IOwnerRepository, OwnerRepository
from services.interfaces import IOwnerService
from services.owner_service import OwnerService


def get_owner_repository(db: Session = Depends(get_db)) -> IOwnerRepository:
    """
    Factory function for creating OwnerRepository instances.

    Args:
        db: Database session (injected)

    Returns:
        IOwnerRepository implementation
    """
    return OwnerRepository(db)


def get_owner_service(
    db: Session = Depends(get_db),
    owner_repo: IOwnerRepository = Depends(get_owner_repository)
) -> IOwnerService:
    """
    Factory function for creating OwnerService instances.

    Args:
        db: Database session (injected)
        owner_repo: Owner repository bound to the same session (injected)

    Returns:
        IOwnerService implementation
    """
    return OwnerService(db, owner_repo)
