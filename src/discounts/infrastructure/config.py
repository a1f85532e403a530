"""Application settings.

Loaded from environment variables, or a ``.env`` file if present, with
defaults suitable for local use.  Invalid values fail fast with pydantic's
ValidationError when the settings are built.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from discounts.infrastructure.persistence.sqlite_product_repository import (
    RowFailurePolicy,
)

# When installed in editable mode the project root is the repo root.
ROOT_DIR = Path(__file__).resolve().parents[3]
DATA_DIR = ROOT_DIR / "data"

ENV_PREFIX = "DISCOUNTS_"


class Settings(BaseModel):
    """Runtime configuration for the discount service."""

    db_path: Path = Field(
        default=DATA_DIR / "discounts.db",
        description="SQLite database file",
    )
    db_timeout: float = Field(
        default=30.0,
        gt=0,
        description="Seconds to wait for a database lock before failing",
    )
    row_failure_policy: RowFailurePolicy = Field(
        default=RowFailurePolicy.SKIP,
        description="Skip or fail on unreadable rows when listing products",
    )
    log_level: str = Field(default="WARNING", description="Root log level")

    @field_validator("row_failure_policy", mode="before")
    @classmethod
    def lowercase_policy(cls, v):
        return v.lower() if isinstance(v, str) else v

    @field_validator("log_level")
    @classmethod
    def log_level_must_be_known(cls, v: str) -> str:
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v}")
        return level

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from ``DISCOUNTS_*`` variables.

        With no explicit mapping, ``.env`` is loaded into the process
        environment first.
        """
        if environ is None:
            load_dotenv()
            environ = os.environ

        values = {
            name: environ[ENV_PREFIX + name.upper()]
            for name in cls.model_fields
            if ENV_PREFIX + name.upper() in environ
        }
        return cls(**values)
