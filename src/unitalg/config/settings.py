"""Runtime settings, read from ``UNITALG_*`` environment variables.

Priority chain (highest to lowest):
  1. Init kwargs
  2. Env vars -- ``UNITALG_*`` prefix
  3. Code defaults
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class UnitsSettings(BaseSettings):
    """Settings for building the default registry.

    Attributes:
        definitions_path: Extra definition file appended after the built-in
            table. Its lines may refer to built-in units and may redefine them.
        verbose: Emit debug-level diagnostics.
        log_json: Render diagnostics as JSON lines.
    """

    model_config = SettingsConfigDict(env_prefix="UNITALG_", frozen=True)

    definitions_path: Path | None = Field(default=None)
    verbose: bool = False
    log_json: bool = False


__all__ = ["UnitsSettings"]
