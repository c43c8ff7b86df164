"""Configuration management for LadderPy."""

from __future__ import annotations

import json
from argparse import ArgumentParser
from multiprocessing import cpu_count
from typing import Literal

from loguru import logger
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from ladderpy.utils import expand_file_path


class Config(BaseModel):
    """Configuration for a ladder search run."""

    start: str | None = Field(None, description="First word of the ladder")
    end: str | None = Field(None, description="Last word of the ladder")
    pairs: str | None = Field(None, description="File with one 'start end' pair per line")

    # Dictionary
    source: Literal["english-words", "wordfreq", "file"] = Field(
        "english-words", description="Base dictionary"
    )
    top_n: int | None = Field(None, ge=1, description="Top N most common words (wordfreq)")
    include: str | None = None
    exclude: str | None = None

    # Output
    output: str | None = None
    format: Literal["text", "yaml", "json"] = "text"
    max_ladders: int | None = Field(None, ge=1, description="Ladders written per pair")

    strict: bool = False
    verbose: bool = False
    debug: bool = False
    log_file: str | None = None
    jobs: int = Field(default_factory=cpu_count, ge=1)

    @field_validator("start", "end", mode="before")
    @classmethod
    def normalize_word(cls, v):
        """Strip and lower-case endpoint words."""
        if v is None:
            return None
        if isinstance(v, str):
            return v.strip().lower() or None
        return v

    @model_validator(mode="after")
    def validate_cross_fields(self):
        """Validate cross-field constraints."""
        if (self.start is None) != (self.end is None):
            raise ValueError("start and end must be given together")
        if self.start is None and not self.pairs:
            raise ValueError("either start/end or pairs is required")
        if self.start is not None and self.pairs:
            raise ValueError("start/end and pairs are mutually exclusive")
        if self.source == "wordfreq" and not self.top_n:
            raise ValueError("top_n is required for the wordfreq source")
        if self.source == "file" and not self.include:
            raise ValueError("include is required for the file source")
        return self


def load_config(json_path: str | None, cli_args, parser: ArgumentParser) -> Config:
    """Load JSON config, override with CLI args, return Config object."""

    def get_value(key: str, fallback):
        """Get value with correct priority: CLI > JSON > Fallback."""
        cli_value = getattr(cli_args, key)
        default_value = parser.get_default(key)
        # Use CLI value only if it was explicitly set by the user
        if cli_value != default_value:
            return cli_value
        return json_config.get(key, fallback)

    json_config = {}
    if json_path:
        json_path = expand_file_path(json_path) or json_path
        try:
            with open(json_path, "r", encoding="utf-8") as f:
                json_config = json.load(f)
        except FileNotFoundError:
            logger.error(f"✗ Config file not found: {json_path}")
            logger.error("  Please check the file path and try again")
            raise
        except json.JSONDecodeError as e:
            logger.error(f"✗ Invalid JSON in config file {json_path}: {e}")
            logger.error("  Please validate your JSON syntax")
            raise ValueError(f"Invalid JSON configuration: {e}") from e
        except PermissionError:
            logger.error(f"✗ Permission denied reading config file: {json_path}")
            logger.error("  Please check file permissions and try again")
            raise

    config_dict = {
        "start": get_value("start", None),
        "end": get_value("end", None),
        "pairs": get_value("pairs", None),
        "source": get_value("source", "english-words"),
        "top_n": get_value("top_n", None),
        "include": get_value("include", None),
        "exclude": get_value("exclude", None),
        "output": get_value("output", None),
        "format": get_value("format", "text"),
        "max_ladders": get_value("max_ladders", None),
        "strict": cli_args.strict or json_config.get("strict", False),
        "verbose": cli_args.verbose or json_config.get("verbose", False),
        "debug": cli_args.debug or json_config.get("debug", False),
        "log_file": get_value("log_file", None),
        "jobs": get_value("jobs", None) or cpu_count(),
    }

    try:
        return Config.model_validate(config_dict)
    except ValidationError as e:
        logger.error(f"✗ Configuration validation failed: {e}")
        logger.error("  Please check your configuration values")
        raise ValueError(f"Invalid configuration: {e}") from e
