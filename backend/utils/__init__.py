"""
Logging setup and API error translation helpers.
"""

from .error_handlers import handle_api_errors
from .logging_utils import configure_logging, log_operation

__all__ = ["handle_api_errors", "configure_logging", "log_operation"]
