"""
Runtime Configuration

Reads the application settings from environment variables once at import time.

Variables:
- PETCLINIC_DATA_DIR: directory holding the default SQLite database and logs
- PETCLINIC_DATABASE_URL: SQLAlchemy URL (defaults to a SQLite file in the data dir)
- PETCLINIC_LOG_LEVEL: root log level name
- PETCLINIC_SQL_ECHO: echo SQL statements when 'true', '1' or 'yes'
"""
import os
from pathlib import Path


def _env_flag(name: str, default: str = 'false') -> bool:
    """Interpret an environment variable as a boolean flag."""
    return os.environ.get(name, default).lower() in ('true', '1', 'yes')


def get_data_dir() -> Path:
    """
    Resolve the directory used for the default database and log files.

    Returns:
        Path from PETCLINIC_DATA_DIR, or ~/.petclinic when unset
    """
    data_dir = os.environ.get('PETCLINIC_DATA_DIR')
    if data_dir:
        return Path(data_dir).expanduser()
    return Path.home() / ".petclinic"


def get_database_url() -> str:
    """
    Resolve the SQLAlchemy database URL.

    Returns:
        PETCLINIC_DATABASE_URL if set, otherwise a SQLite file under the data dir
    """
    url = os.environ.get('PETCLINIC_DATABASE_URL')
    if url:
        return url
    return f"sqlite:///{get_data_dir() / 'petclinic.db'}"


DATA_DIR = get_data_dir()
LOG_DIR = DATA_DIR / "logs"
DATABASE_URL = get_database_url()
LOG_LEVEL = os.environ.get('PETCLINIC_LOG_LEVEL', 'INFO').upper()
SQL_ECHO = _env_flag('PETCLINIC_SQL_ECHO')
