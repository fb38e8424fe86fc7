"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field

from linediff.core.models import NormalizationConfig


CONFIG_FILE = "config.yaml"
ENV_PREFIX = "LINEDIFF_"


class Settings(BaseModel):
    app_name:          str  = "linediff"
    ignore_whitespace: bool = Field(default=False, description="Collapse whitespace runs before comparing")
    ignore_case:       bool = Field(default=False, description="Lowercase lines before comparing")
    context_lines:     int  = Field(default=3, ge=0, le=10, description="Unchanged lines around each change")
    show_line_numbers: bool = Field(default=True, description="Show line numbers in views and HTML export")
    view_mode:         str  = Field(default="unified", pattern="^(unified|split)$", description="unified or split")
    left_name:         Optional[str] = Field(default=None, description="Label for the left side in exports; defaults to the file name")
    right_name:        Optional[str] = Field(default=None, description="Label for the right side in exports; defaults to the file name")
    output_dir:        str  = Field(default=".", description="Directory for exported files")
    max_cells:         int  = Field(default=25_000_000, ge=0, description="Max LCS table cells (m*n); 0 disables")
    warn_cells:        int  = Field(default=1_000_000, ge=0, description="Log a warning above this many cells")
    log_level:         str  = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")

    def normalization(self) -> NormalizationConfig:
        return NormalizationConfig(ignore_whitespace=self.ignore_whitespace, ignore_case=self.ignore_case)


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then LINEDIFF_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"{ENV_PREFIX}{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
