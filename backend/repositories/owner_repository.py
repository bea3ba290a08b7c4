"""
Owner repository for owner-specific data access operations.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from sqlalchemy.orm import Session

from models import Owner


class IOwnerRepository(ABC):
    """
    Storage contract for owners.

    Absence is reported as None or an empty list; implementations never
    raise for a missing owner.
    """

    @abstractmethod
    def save(self, owner: Owner) -> Owner:
        """
        Insert the owner when it has no id, otherwise replace the stored row.

        Args:
            owner: Owner to persist

        Returns:
            The stored owner, with its id assigned
        """
        pass

    @abstractmethod
    def find_by_id(self, owner_id: Optional[int]) -> Optional[Owner]:
        """
        Look up an owner by id.

        Args:
            owner_id: Primary key value

        Returns:
            Owner instance or None if not found
        """
        pass

    @abstractmethod
    def find_by_last_name(self, last_name: str) -> List[Owner]:
        """
        Find every owner whose last name equals the given value exactly.

        Args:
            last_name: Last name to match

        Returns:
            List of matching owners, empty when none match
        """
        pass


class OwnerRepository(IOwnerRepository):
    """SQLAlchemy implementation of the owner storage contract."""

    def __init__(self, db: Session):
        """
        Initialize the repository.

        Args:
            db: SQLAlchemy database session
        """
        self.db = db
        self.model = Owner

    def save(self, owner: Owner) -> Owner:
        if owner.id is None:
            self.db.add(owner)
            self.db.flush()
            return owner

        stored = self.db.get(self.model, owner.id)
        if stored is None:
            # Explicit id with no stored row: insert under that id
            self.db.add(owner)
            self.db.flush()
            return owner

        if stored is not owner:
            # Full replacement, unset attributes read as None
            for attr in self.model.__mapper__.column_attrs:
                if attr.key != 'id':
                    setattr(stored, attr.key, getattr(owner, attr.key))

        self.db.flush()
        return stored

    def find_by_id(self, owner_id: Optional[int]) -> Optional[Owner]:
        if owner_id is None:
            return None
        return self.db.get(self.model, owner_id)

    def find_by_last_name(self, last_name: Optional[str]) -> List[Owner]:
        # Equality with None would compile to IS NULL
        if last_name is None:
            return []
        return self.db.query(self.model).filter(
            self.model.last_name == last_name
        ).all()
