"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from environment
variables.  Defaults are provided for all fields, so the service starts
without any configuration at all.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "User Store API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path of a log file.  When empty, logs go to the console only.
    log_file: str = os.getenv("LOG_FILE", "")

    # Emit one log line per HTTP request (uvicorn access log).
    access_log: bool = os.getenv("ACCESS_LOG", "false").lower() in {"1", "true", "yes"}

    # Bind address used by ``run.py``.
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "9090"))

    # How the record store assigns identifiers.  ``sequence`` never reuses
    # an id; ``count`` derives the id from the number of stored entries
    # and may overwrite an existing entry after deletions.
    id_strategy: str = os.getenv("ID_STRATEGY", "sequence")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables must
# be set before importing this module.
settings = Settings()
