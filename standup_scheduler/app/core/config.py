"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for every field except
the listening port, which ``run.py`` insists on.  A ``.env`` file in
the working directory is loaded first so local development does not
need exported variables.
"""

import os
from dataclasses import dataclass, field
from typing import List, Optional

from dotenv import load_dotenv

load_dotenv()


def _split_csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Standup Scheduler API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Path to the SQLite database file.  Relative paths are resolved
    # against the project root by ``core.db``.
    database_url: str = os.getenv("DATABASE_URL", "standups.db")

    # Number of pooled connections and the upper bound (in seconds) for
    # both checking a connection out of the pool and waiting on a
    # locked database.
    db_pool_size: int = int(os.getenv("DB_POOL_SIZE", "5"))
    db_timeout: float = float(os.getenv("DB_TIMEOUT", "5.0"))

    # Prefix applied to every router.  Empty by default so the public
    # paths are ``/users``, ``/standups/...`` and so on.
    api_prefix: str = os.getenv("API_PREFIX", "")

    cors_origins: List[str] = field(
        default_factory=lambda: _split_csv(os.getenv("CORS_ORIGINS", "*"))
    )

    host: str = os.getenv("HOST", "0.0.0.0")
    port: Optional[int] = int(os.environ["PORT"]) if os.getenv("PORT") else None


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.
settings = Settings()
