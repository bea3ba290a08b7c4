"""
Error handling decorator for API endpoints.

Converts application and storage exceptions raised below the route layer into
HTTPException responses with consistent status codes and messages.
"""

from functools import wraps
from typing import Callable
from fastapi import HTTPException
from sqlalchemy.exc import OperationalError, SQLAlchemyError
import logging

from constants import HTTPStatus
from exceptions import ApplicationError, OwnerNotFoundError

logger = logging.getLogger(__name__)


def handle_api_errors(operation_name: str):
    """
    Decorator to handle common API errors consistently across endpoints.

    Args:
        operation_name: Human-readable name of the operation (e.g., "Update owner")

    Returns:
        Decorated function that handles errors uniformly

    Example:
        @router.get("/owners/{owner_id}")
        @handle_api_errors("Get owner")
        def get_owner(owner_id: int, ...):
            return service.find_by_id(owner_id)
    """
    def decorator(func: Callable):
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except OwnerNotFoundError as e:
                logger.warning(f"{operation_name} - {e.message}")
                raise HTTPException(
                    status_code=HTTPStatus.NOT_FOUND,
                    detail=e.message
                )
            except ApplicationError as e:
                logger.error(f"{operation_name} - Application error: {e.message}", exc_info=True)
                raise HTTPException(
                    status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
                    detail=f"{operation_name} failed: {e.message}"
                )
            except OperationalError as e:
                logger.error(f"{operation_name} - Database unavailable: {e}", exc_info=True)
                raise HTTPException(
                    status_code=HTTPStatus.SERVICE_UNAVAILABLE,
                    detail="Database unavailable"
                )
            except SQLAlchemyError as e:
                logger.error(f"{operation_name} - Database error: {e}", exc_info=True)
                raise HTTPException(
                    status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
                    detail=f"Database operation failed during {operation_name.lower()}"
                )
            except HTTPException:
                # Re-raise HTTPException as-is to preserve status code and detail
                raise
            except Exception as e:
                logger.error(f"{operation_name} - Unexpected error: {e}", exc_info=True)
                raise HTTPException(
                    status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
                    detail=f"{operation_name} failed. Please check server logs or contact support."
                )

        return wrapper

    return decorator
