"""Configuration models (Pydantic classes)."""

import logging
from pathlib import Path

from pydantic import BaseModel, Field, field_validator


class LoggingConfig(BaseModel):
    """Logging handlers and levels."""

    console_level: str = "INFO"
    file_level: str = "DEBUG"
    log_file: Path | None = Field(
        default=None,
        description="Optional path for a rotating log file. If None, log to console only.",
    )
    max_bytes: int = Field(default=10_000_000, gt=0)  # 10MB
    backup_count: int = Field(default=5, ge=0)

    @field_validator("console_level", "file_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = str(value).strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value!r}")
        return level

    @property
    def console_level_no(self) -> int:
        return logging.getLevelName(self.console_level)

    @property
    def file_level_no(self) -> int:
        return logging.getLevelName(self.file_level)


class CohortConfig(BaseModel):
    """
    Settings for cohort-level tallies.

    `combine` never re-checks numerator <= denominator; set `revalidate_sums` to
    check the invariant on each tallied total.
    """

    revalidate_sums: bool = False


class PhenotypesConfig(BaseModel):
    """
    Runtime configuration.
    - Loaded from configs/phenotypes.yaml (or the file named by PHENOTYPES_CONFIG)
    - Environment overrides applied by the configuration loader
    - Defaults apply when no file is present
    """

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    cohort: CohortConfig = Field(default_factory=CohortConfig)
