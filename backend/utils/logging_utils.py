"""
Logging Utilities

Root logger setup shared by the API entry point and scripts, plus a
decorator that logs the start and end of service operations.
"""

import logging
import sys
from functools import wraps
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_FILE_NAME = "petclinic.log"

_configured = False


def configure_logging(level: str = "INFO", log_dir: Optional[Path] = None) -> None:
    """
    Install console and rotating file handlers on the root logger.

    Calling it more than once has no further effect.

    Args:
        level: Log level name (e.g. "INFO", "DEBUG")
        log_dir: Directory for the rotating log file; console only when None
    """
    global _configured
    if _configured:
        return

    log_formatter = logging.Formatter(LOG_FORMAT)
    log_level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(log_formatter)
    console_handler.setLevel(log_level)
    root_logger.addHandler(console_handler)

    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        # 10MB per file, keep 5 backups
        file_handler = RotatingFileHandler(
            log_dir / LOG_FILE_NAME,
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
            encoding='utf-8'
        )
        file_handler.setFormatter(log_formatter)
        file_handler.setLevel(log_level)
        root_logger.addHandler(file_handler)

    _configured = True
    logging.getLogger(__name__).info(
        f"Logging initialized: level={logging.getLevelName(log_level)}, "
        f"file={log_dir / LOG_FILE_NAME if log_dir else None}"
    )


def _owner_id_from_call(args, kwargs):
    """Pull an owner id out of the call arguments when there is one."""
    if "owner_id" in kwargs:
        return kwargs["owner_id"]
    for arg in args[1:]:
        if isinstance(arg, int) and not isinstance(arg, bool):
            return arg
        if hasattr(arg, "__tablename__") and hasattr(arg, "id"):
            return arg.id
    return None


def log_operation(operation_name: str):
    """
    Decorator to log operation start/end at DEBUG and failures at WARNING.

    Args:
        operation_name: Name of the operation

    Example:
        @log_operation("update_owner")
        def update(self, owner):
            ...
    """
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            logger = logging.getLogger(func.__module__)
            owner_id = _owner_id_from_call(args, kwargs)

            logger.debug(f"Starting {operation_name} (owner_id={owner_id})")
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                logger.warning(
                    f"Failed {operation_name} (owner_id={owner_id}): "
                    f"{type(e).__name__}: {e}"
                )
                raise
            logger.debug(f"Completed {operation_name} (owner_id={owner_id})")
            return result

        return wrapper

    return decorator
