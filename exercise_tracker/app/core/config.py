"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  A ``.env`` file in the working directory is
loaded first (if present) so that local overrides do not need to be
exported in the shell.  Defaults are provided for all fields.
"""

import os
from dataclasses import dataclass
from typing import List

from dotenv import load_dotenv

load_dotenv()


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Exercise Tracker")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Address the uvicorn server binds to when started through ``run.py``.
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))

    # Comma‑separated list of allowed origins.  ``*`` permits any origin.
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")

    # Prefix under which the JSON routes are mounted.
    api_prefix: str = os.getenv("API_PREFIX", "/api")

    @property
    def cors_origin_list(self) -> List[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
