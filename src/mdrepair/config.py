"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "config.yaml"


class Settings(BaseModel):
    output_dir:    str = Field(default=".",             description="Directory for exported .md/.html files")
    output_format: str = Field(default="md", pattern="^(md|html)$", description="md or html")
    default_stem:  str = Field(default="report_export", min_length=1, description="Filename stem when no title is found")
    parser_config: str = Field(default="gfm-like",      description="MarkdownIt preset used for HTML rendering")
    input_encoding: str = Field(default="utf-8-sig",    description="Text encoding for reading pasted reports; -sig drops a BOM")
    encoding:      str = Field(default="utf-8",         description="Text encoding for written exports")


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then MDREPAIR_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"MDREPAIR_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
