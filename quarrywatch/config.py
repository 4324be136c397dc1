"""Monitor configuration — env-driven via pydantic-settings.

Reads from a ``.env`` file and ``QUARRYWATCH_*`` environment variables.
CLI options override individual fields per invocation.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class MonitorConfig(BaseSettings):
    """Monitor configuration with environment variable overrides.

    Examples
    --------
    Override via environment::

        export QUARRYWATCH_STATE_PATH=/mnt/disk/quarry_state.json
        export QUARRYWATCH_MAP_INTERVAL=10
        export QUARRYWATCH_LOG_LEVEL=DEBUG
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="QUARRYWATCH_",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Runtime environment
    environment: str = "development"
    log_level: str = "INFO"

    # Snapshot source
    state_path: Path = Path("quarry_state.json")

    # Loop cadences (seconds)
    poll_interval: float = Field(default=1.0, gt=0)
    text_interval: float = Field(default=1.0, gt=0)
    map_interval: float = Field(default=5.0, gt=0)
    # Pause between display surfaces within one map pass
    surface_pause: float = Field(default=1.0, ge=0)

    # Map geometry
    map_aspect: float = Field(default=5 / 8, gt=0, le=1)
    min_scale: float = Field(default=0.5, gt=0)
    max_scale: float = Field(default=5.0, gt=0)
    scale_step: float = Field(default=0.5, gt=0)

    @model_validator(mode="after")
    def _check_scale_range(self) -> MonitorConfig:
        if self.min_scale > self.max_scale:
            raise ValueError(
                f"min_scale ({self.min_scale}) must not exceed max_scale ({self.max_scale})"
            )
        return self

    @property
    def is_production(self) -> bool:
        """Whether running in production mode."""
        return self.environment == "production"
