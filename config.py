"""
config.py
---------
Central configuration module. Loads environment variables (and an optional
.env file) once and exposes them as a typed, immutable Settings value that
is passed explicitly to the connection source and repositories.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


@dataclass(frozen=True)
class Settings:
    """
    Database and logging settings for one process.

    Attributes:
        database_url: libpq connection URL.
        user: Database user.
        password: Database password.
        schema: Optional schema qualifying the table names.
        init_script: Optional SQL script run once when the pool opens.
        pool_min: Minimum number of pooled connections.
        pool_max: Maximum number of pooled connections.
        log_level: Root logging level name.
    """
    database_url: str
    user: str
    password: str = ""
    schema: Optional[str] = None
    init_script: Optional[str] = None
    pool_min: int = 1
    pool_max: int = 5
    log_level: str = "INFO"


def _get(name: str, default: Optional[str] = None) -> Optional[str]:
    """Read an env var, treating blank values as unset."""
    value = os.getenv(name, "").strip()
    return value or default


def _get_int(name: str, default: int) -> int:
    raw = _get(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def load_settings(env_file: Optional[str] = None) -> Settings:
    """
    Build Settings from the environment.

    Args:
        env_file: Optional path to a .env file; defaults to dotenv's lookup.

    Returns:
        A frozen Settings instance.
    """
    load_dotenv(env_file)

    # ── PostgreSQL ────────────────────────────────────────
    host = _get("DB_HOST", "localhost")
    port = _get_int("DB_PORT", 5432)
    name = _get("DB_NAME", "manufacturers")
    database_url = _get("DATABASE_URL", f"postgresql://{host}:{port}/{name}")

    pool_min = _get_int("DB_POOL_MIN", 1)
    pool_max = _get_int("DB_POOL_MAX", 5)
    if not 0 <= pool_min <= pool_max or pool_max < 1:
        raise ValueError(
            f"DB_POOL_MIN must be between 0 and DB_POOL_MAX, got {pool_min} and {pool_max}"
        )

    return Settings(
        database_url=database_url,
        user=_get("DB_USER", "postgres"),
        password=_get("DB_PASS", ""),
        schema=_get("DB_SCHEMA"),
        init_script=_get("DB_INIT_SCRIPT"),
        pool_min=pool_min,
        pool_max=pool_max,
        # ── Logging ───────────────────────────────────────
        log_level=_get("LOG_LEVEL", "INFO").upper(),
    )
