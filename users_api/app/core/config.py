"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from environment
variables.  Defaults are provided for all fields, so the service starts
with no configuration at all and listens on port 4000, persisting users
to ``users.json`` in the current working directory.
"""

import os
from dataclasses import dataclass


def _int_env(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except (TypeError, ValueError):
        return default


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Users API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Address and port for the uvicorn server started by ``run.py``.
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = _int_env("PORT", 4000)

    # Backing file for the user collection.  A relative path is resolved
    # against the current working directory by ``core.storage``.
    data_file: str = os.getenv("DATA_FILE", "users.json")

    # Optional file that log records are mirrored to.
    log_file: str = os.getenv("LOG_FILE", "")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables must
# be set before this module is imported.
settings = Settings()
