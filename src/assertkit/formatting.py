"""Rendering of subject values for default failure messages."""

from __future__ import annotations

import reprlib
from typing import Any

from assertkit.config import FormatConfig, get_config


def _repr_for(config: FormatConfig) -> reprlib.Repr:
    r = reprlib.Repr()
    r.maxstring = config.max_string
    r.maxother = config.max_string
    r.maxlevel = config.max_depth
    r.maxlist = r.maxtuple = r.maxset = r.maxfrozenset = r.maxdeque = config.max_items
    r.maxdict = config.max_items
    return r


def format_value(value: Any, config: FormatConfig | None = None) -> str:
    if config is None:
        config = get_config().format

    # Classes read better as their name than as "<class '...'>".
    if isinstance(value, type):
        return value.__qualname__
    if isinstance(value, tuple) and value and all(isinstance(v, type) for v in value):
        return "(" + ", ".join(v.__qualname__ for v in value) + ")"

    return _repr_for(config).repr(value)
