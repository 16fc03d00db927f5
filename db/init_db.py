"""
db/init_db.py
-------------
Bootstraps the database schema from an SQL init script.
Relative script paths are resolved against this package, so the bundled
``init_db.sql`` can be referenced by name. Run this module directly to
initialize a fresh database with the current settings:
    python -m db.init_db
"""

from pathlib import Path

import psycopg2

from repositories.exceptions import StoreError
from utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_SCRIPT = "init_db.sql"
_SCRIPT_DIR = Path(__file__).resolve().parent


def resolve_script(script: str) -> Path:
    """
    Locate an init script on disk.

    Raises:
        StoreError: If the file does not exist.
    """
    path = Path(script)
    if not path.is_absolute():
        path = _SCRIPT_DIR / path
    if not path.is_file():
        raise StoreError(f"Invalid DB_INIT_SCRIPT setting, no such file: {script}")
    return path


def run_init_script(source, script: str = DEFAULT_SCRIPT) -> None:
    """
    Execute every statement of an init script over one pooled connection.

    Args:
        source: A ConnectionSource.
        script: Path of the SQL file, absolute or relative to ``db/``.

    Raises:
        StoreError: If the script is missing, unreadable or fails to execute.
    """
    path = resolve_script(script)
    try:
        sql = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Failed to read init script {path.name}: {e}")
        raise StoreError(f"Cannot read init script: {path.name}", e) from e
    try:
        with source.connection() as conn:
            with conn.cursor() as cur:
                cur.execute(sql)
    except psycopg2.Error as e:
        logger.error(f"Failed to run init script {path.name}: {e}")
        raise StoreError(f"Error when executing init script: {path.name}", e) from e
    logger.info(f"Database schema initialized from {path.name}.")


if __name__ == "__main__":
    from config import load_settings
    from db.connection import ConnectionSource

    settings = load_settings()
    source = ConnectionSource.from_settings(settings)
    try:
        if not settings.init_script:
            run_init_script(source)
    finally:
        source.close()
