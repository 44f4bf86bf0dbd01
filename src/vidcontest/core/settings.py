"""Environment-driven configuration.

All settings are read from ``VIDCONTEST_*`` environment variables at call
time so tests and the CLI can override them per process.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

# Default SQLite database path, used when no database URL is configured
DEFAULT_DB_PATH = Path("data/vidcontest.db")

DEFAULT_CORS_ORIGINS = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]


@dataclass
class Settings:
    """Resolved runtime settings."""

    database_url: str
    log_level: str = "INFO"
    cors_origins: list[str] = field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))


def sqlite_url(db_path: Path) -> str:
    """Build a SQLAlchemy URL for a SQLite file."""
    return f"sqlite:///{db_path}"


def get_settings() -> Settings:
    """Read settings from the environment.

    ``VIDCONTEST_DATABASE_URL`` wins over ``VIDCONTEST_DB_PATH``; with neither
    set the database lives at data/vidcontest.db.
    """
    database_url = os.environ.get("VIDCONTEST_DATABASE_URL")
    if not database_url:
        db_path = Path(os.environ.get("VIDCONTEST_DB_PATH", str(DEFAULT_DB_PATH)))
        database_url = sqlite_url(db_path)

    origins_raw = os.environ.get("VIDCONTEST_CORS_ORIGINS")
    if origins_raw:
        cors_origins = [o.strip() for o in origins_raw.split(",") if o.strip()]
    else:
        cors_origins = list(DEFAULT_CORS_ORIGINS)

    return Settings(
        database_url=database_url,
        log_level=os.environ.get("VIDCONTEST_LOG_LEVEL", "INFO").upper(),
        cors_origins=cors_origins,
    )
