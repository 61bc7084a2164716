from __future__ import annotations

from pathlib import Path
from typing import Literal, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .core.aggregators import AGGREGATORS


DEFAULT_CONFIG_FILE = "tsstats.yaml"


class RollingConfig(BaseModel):
    window_size: int = Field(3, ge=1, description="Number of observations in the rolling window")
    skip_na_input: bool = Field(True, description="Do not feed NA inputs to the filter")
    skip_na_output: bool = Field(True, description="Do not store NA filter outputs")


class AlignmentConfig(BaseModel):
    aggregator: str = Field(
        "sum",
        description="Aggregation of same-side runs before alignment (sum | first | last)",
    )
    skipna: bool = True

    @field_validator("aggregator")
    @classmethod
    def _known_aggregator(cls, v: str) -> str:
        key = v.lower()
        if key not in AGGREGATORS:
            raise ValueError(f"unknown aggregator {v!r}, expected one of {sorted(AGGREGATORS)}")
        return key


class PrintSettings(BaseModel):
    """Layout of series printed in aligned columns."""

    index_width: int = Field(4, ge=1)
    values_width: int = Field(8, ge=1)
    index_value_sep: str = " | "
    precision: int = Field(4, ge=0, description="Digits after the decimal point for floats")

    def line_width(self, n_series: int) -> int:
        return self.index_width + len(self.index_value_sep) + self.values_width * n_series


class RuntimeConfig(BaseModel):
    rolling: RollingConfig = Field(default_factory=RollingConfig)
    alignment: AlignmentConfig = Field(default_factory=AlignmentConfig)
    printing: PrintSettings = Field(default_factory=PrintSettings)


class EnvSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: Literal["json", "text"] = "json"


class AppConfig(BaseModel):
    env: EnvSettings
    runtime: RuntimeConfig

    @field_validator("env", mode="before")
    @classmethod
    def _coerce_env(cls, v):  # type: ignore[no-untyped-def]
        if isinstance(v, dict):
            return EnvSettings(**v)
        return v

    @staticmethod
    def load(config_path: Optional[Path] = None) -> "AppConfig":
        env = EnvSettings()  # loads from environment and .env

        runtime = RuntimeConfig()
        if config_path is None:
            default_path = Path(DEFAULT_CONFIG_FILE)
            config_path = default_path if default_path.exists() else None

        if config_path and Path(config_path).exists():
            with open(config_path, "r", encoding="utf-8") as fh:
                raw = yaml.safe_load(fh) or {}
            if not isinstance(raw, dict):
                raise ValueError(f"Invalid {Path(config_path).name}: expected a mapping")
            try:
                runtime = RuntimeConfig(**raw)
            except ValidationError as ve:
                raise ValueError(f"Invalid {Path(config_path).name}: {ve}")

        return AppConfig(env=env, runtime=runtime)


def load_config(config_path: Optional[Path] = None) -> AppConfig:
    """Load merged configuration from environment and optional YAML."""

    return AppConfig.load(config_path)
