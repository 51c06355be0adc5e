from __future__ import annotations

import logging
from pathlib import Path

import yaml
from expandvars import expandvars
from pydantic import BaseModel, ConfigDict, field_validator

logger = logging.getLogger(__name__)


class FormatConfig(BaseModel):
    """Limits applied when rendering values into default failure messages."""

    model_config = ConfigDict(extra="forbid")
    max_string: int = 60
    max_items: int = 6
    max_depth: int = 3

    @field_validator("max_string", "max_items", "max_depth")
    @classmethod
    def must_be_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("must be a positive integer")
        return v


class AssertConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    format: FormatConfig = FormatConfig()


_active = AssertConfig()


def get_config() -> AssertConfig:
    return _active


def set_config(config: AssertConfig) -> None:
    global _active
    _active = config


def reset_config() -> None:
    set_config(AssertConfig())


def load_config(path: Path) -> AssertConfig:
    """Load and validate an assertkit config from a YAML file.

    ``${VAR}`` and ``${VAR:-default}`` references are expanded from the
    environment before the YAML is parsed.
    """
    logger.info(f"Loading assertkit config from {path}")

    with open(path) as f:
        raw = yaml.safe_load(expandvars(f.read()))

    if raw is None:
        logger.info(f"Config file {path} is empty, using defaults")
        return AssertConfig()

    return AssertConfig(**raw)
