"""Configuration management for MTIE computation."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict
import tomllib

from .metrics import COMPLETE_MAX_SAMPLES


class LoggingConfig(BaseModel):
    """Logging configuration settings."""

    # Logging severity threshold (INFO/DEBUG/etc.).
    level: str = Field(default="WARNING", description="Logging level")
    # Emit JSON if True; otherwise emit a human-readable format.
    json_format: bool = Field(default=False, description="Emit JSON logs")
    # Optional file path for log output; if None, logs go to stderr.
    log_file: str | None = Field(default=None, description="Optional log file path")
    # Maximum size (bytes) before log rotation.
    max_bytes: int = Field(default=1_000_000, description="Max log file size before rotation")
    # Number of backup files to retain.
    backup_count: int = Field(default=3, description="Number of rotated log files to keep")


class EngineConfig(BaseModel):
    """MTIE engine selection settings."""

    # Hard ceiling on input size for the O(n^2) engine.
    complete_max_samples: int = Field(
        default=COMPLETE_MAX_SAMPLES, ge=1, description="Largest input the complete engine accepts"
    )
    # Inputs up to this size use the complete engine; larger ones use the fast engine.
    selection_threshold: int = Field(
        default=COMPLETE_MAX_SAMPLES, ge=0, description="Sample count crossover between engines"
    )


class MtieSettings(BaseSettings):
    """Configuration settings loaded from env or optional TOML."""

    # Environment keys use MTIE_ prefix and "__" nesting.
    model_config = SettingsConfigDict(env_prefix="MTIE_", env_nested_delimiter="__", extra="ignore")

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    engine: EngineConfig = Field(default_factory=EngineConfig)

    @classmethod
    def from_toml(cls, path: str | Path) -> "MtieSettings":
        data = tomllib.loads(Path(path).read_text(encoding="utf-8"))
        return cls(**data)
