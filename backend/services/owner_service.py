"""
Owner Service

Business logic for owner records: create, lookup by id or last name, and
full-replacement update of an existing owner.
"""

from typing import List, Optional
from sqlalchemy.orm import Session
import logging

from models import Owner
from exceptions import OwnerNotFoundError
from repositories.owner_repository import IOwnerRepository, OwnerRepository
from services.interfaces import IOwnerService
from utils.logging_utils import log_operation

logger = logging.getLogger(__name__)


class OwnerService(IOwnerService):
    """Service for owner-related business logic."""

    def __init__(self, db: Session, owner_repo: Optional[IOwnerRepository] = None):
        """
        Initialize OwnerService.

        Args:
            db: Database session, committed after each write
            owner_repo: Storage gateway, defaults to OwnerRepository(db)
        """
        self.db = db
        self.owner_repo = owner_repo or OwnerRepository(db)

    @log_operation("create_owner")
    def create(self, owner: Owner) -> Owner:
        created = self.owner_repo.save(owner)
        self.db.commit()
        logger.info(f"Created owner {created.id} ({created.first_name} {created.last_name})")
        return created

    @log_operation("find_owner")
    def find_by_id(self, owner_id: Optional[int]) -> Owner:
        owner = self.owner_repo.find_by_id(owner_id)
        if owner is None:
            raise OwnerNotFoundError(owner_id)
        return owner

    @log_operation("find_owners_by_last_name")
    def find_by_last_name(self, last_name: str) -> List[Owner]:
        owners = self.owner_repo.find_by_last_name(last_name)
        logger.info(f"Found {len(owners)} owner(s) with last name '{last_name}'")
        for owner in owners:
            logger.info(f"Owner: {owner}")
        return owners

    @log_operation("update_owner")
    def update(self, owner: Owner) -> Owner:
        # Existence check first, nothing is written for an unknown id
        if self.owner_repo.find_by_id(owner.id) is None:
            raise OwnerNotFoundError(owner.id)

        updated = self.owner_repo.save(owner)
        self.db.commit()
        logger.info(f"Updated owner {updated.id}")
        return updated
