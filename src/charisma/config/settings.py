"""Runtime settings for charisma, read from ``CHARISMA_*`` env vars.

Priority chain (highest to lowest):
  1. Init kwargs — values passed by the caller
  2. Env vars    — ``CHARISMA_VERBOSE``, ``CHARISMA_LOG_JSON``
  3. Code defaults
"""

from __future__ import annotations

from pydantic_settings import BaseSettings


class CharismaSettings(BaseSettings):
    """Logging flags for the ``charisma`` logger namespace."""

    model_config = {
        "frozen": True,
        "env_prefix": "CHARISMA_",
    }

    verbose: bool = False
    log_json: bool = False
