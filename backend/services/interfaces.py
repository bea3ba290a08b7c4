"""
Service Interfaces

Abstract base classes for the service layer. Routes depend on these so the
implementation can be swapped or mocked in tests.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from models import Owner


class IOwnerService(ABC):
    """
    Abstract interface for owner lifecycle operations.
    """

    @abstractmethod
    def create(self, owner: Owner) -> Owner:
        """
        Store a new owner.

        Args:
            owner: Owner without an id

        Returns:
            The stored owner with its assigned id
        """
        pass

    @abstractmethod
    def find_by_id(self, owner_id: Optional[int]) -> Owner:
        """
        Get an owner by id.

        Args:
            owner_id: Owner id

        Returns:
            The stored owner

        Raises:
            OwnerNotFoundError: If no owner has this id
        """
        pass

    @abstractmethod
    def find_by_last_name(self, last_name: str) -> List[Owner]:
        """
        Get every owner with exactly this last name.

        Args:
            last_name: Last name to match

        Returns:
            List of owners, possibly empty
        """
        pass

    @abstractmethod
    def update(self, owner: Owner) -> Owner:
        """
        Replace every field of an existing owner.

        Args:
            owner: Owner carrying the id of a stored owner and the new values

        Returns:
            The updated owner

        Raises:
            OwnerNotFoundError: If the id is missing or no owner has it
        """
        pass
