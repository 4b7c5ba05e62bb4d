"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
application starts with a local Redis and a SQLite file next to the
package.  In a deployment you should override these via environment
variables.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "SC Demo API")
    api_version: str = os.getenv("API_VERSION", "0.1.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path of a log file.  When empty only the console handler
    # is attached.
    log_file: str = os.getenv("LOG_FILE", "")

    # Path of the SQLite database file.  A relative path is resolved
    # against the ``scdemo_api`` package directory by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "scdemo.db")

    # Redis backs the ranking sorted set and the duplicate-execution locks.
    redis_url: str = os.getenv("REDIS_URL", "redis://localhost:6379/0")

    # Upstream used by the sample HTTP client.
    sample_base_url: str = os.getenv("SAMPLE_BASE_URL", "http://localhost:8080")
    sample_timeout_seconds: float = float(os.getenv("SAMPLE_TIMEOUT_SECONDS", "5"))

    # Multiplier applied to every simulated blocking delay in the demo
    # services.  ``0`` turns the delays off.
    simulated_work_scale: float = float(os.getenv("SIMULATED_WORK_SCALE", "1.0"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes values at class creation time, environment variables should
# be set before importing this module.
settings = Settings()
