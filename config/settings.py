"""
Centralized configuration using pydantic-settings.

How it works:
- Reads environment variables automatically (e.g., LOG_LEVEL env var → Settings.LOG_LEVEL)
- Falls back to defaults defined here if env vars are not set
- Can also read from a .env file in the project root

Every module imports `settings` from here instead of hardcoding values.
"""

from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ── Scheduling ──────────────────────────────────────────────
    DEFAULT_SCHEDULING_POLICY: str = "edf"  # used by the API when a request omits policy
    RANDOM_SEED: Optional[int] = None       # unset → random baseline is seeded independently per run

    # ── Job lists ───────────────────────────────────────────────
    JOB_FIELD_SEPARATOR: str = "/"          # name/p/d
    MAX_JOBS_PER_REQUEST: int = 10_000      # upper bound on jobs accepted by the API

    # ── App ─────────────────────────────────────────────────────
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000
    LOG_LEVEL: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


# Singleton, import this everywhere
settings = Settings()
