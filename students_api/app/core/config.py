"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts with no configuration at all; in a deployment you
should override at least ``STORAGE_PATH`` and ``ENV``.
"""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Students API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    # Free-form deployment label (local, dev, production).  Only logged.
    env: str = os.getenv("ENV", "local")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Path to the SQLite database file.  Relative paths are resolved
    # against the current working directory by the ``db`` module.
    storage_path: str = os.getenv("STORAGE_PATH", "storage/storage.db")

    host: str = os.getenv("HTTP_HOST", "0.0.0.0")
    port: int = int(os.getenv("HTTP_PORT", "8082"))

    # Seconds in-flight requests are given to finish once a shutdown
    # signal has been received.
    shutdown_grace_seconds: int = int(os.getenv("SHUTDOWN_GRACE_SECONDS", "5"))

    @property
    def address(self) -> str:
        return f"{self.host}:{self.port}"


# Environment variables must be set before this module is imported.
settings = Settings()
