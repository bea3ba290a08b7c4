"""
Custom exception classes for the application.

This module defines domain-specific exceptions that provide better error handling
and clearer error messages throughout the application.
"""


class ApplicationError(Exception):
    """Base exception for all application errors"""

    def __init__(self, message: str, details: dict | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class OwnerNotFoundError(ApplicationError):
    """Raised when no stored owner has the requested id"""

    def __init__(self, owner_id: int | None):
        self.owner_id = owner_id
        super().__init__(f"Owner not found with id: {owner_id}", {"owner_id": owner_id})

