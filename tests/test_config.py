"""Tests for config loading and validation."""

import textwrap
from pathlib import Path

import pytest
from pydantic import ValidationError

from assertkit.config import (
    AssertConfig,
    FormatConfig,
    get_config,
    load_config,
    reset_config,
    set_config,
)


@pytest.fixture()
def tmp_yaml(tmp_path):
    """Helper that writes YAML content to a temp file and returns its path."""

    def _write(content: str) -> Path:
        p = tmp_path / "assertkit.yaml"
        p.write_text(textwrap.dedent(content))
        return p

    return _write


def test_defaults():
    cfg = AssertConfig()
    assert cfg.format.max_string == 60
    assert cfg.format.max_items == 6
    assert cfg.format.max_depth == 3


def test_load_config(tmp_yaml):
    path = tmp_yaml("""\
        format:
          max_string: 20
          max_items: 3
    """)
    cfg = load_config(path)
    assert cfg.format.max_string == 20
    assert cfg.format.max_items == 3
    assert cfg.format.max_depth == 3


def test_load_empty_config(tmp_yaml):
    cfg = load_config(tmp_yaml(""))
    assert cfg == AssertConfig()


def test_load_config_expands_env_vars(tmp_yaml, monkeypatch):
    monkeypatch.setenv("ASSERTKIT_MAX_ITEMS", "2")
    path = tmp_yaml("""\
        format:
          max_items: ${ASSERTKIT_MAX_ITEMS}
          max_depth: ${ASSERTKIT_UNSET_DEPTH:-5}
    """)
    cfg = load_config(path)
    assert cfg.format.max_items == 2
    assert cfg.format.max_depth == 5


def test_unknown_key_rejected(tmp_yaml):
    path = tmp_yaml("""\
        format:
          max_width: 10
    """)
    with pytest.raises(ValidationError):
        load_config(path)


@pytest.mark.parametrize("field", ["max_string", "max_items", "max_depth"])
def test_limits_must_be_positive(field):
    with pytest.raises(ValidationError, match="positive"):
        FormatConfig(**{field: 0})


def test_set_and_reset_active_config():
    custom = AssertConfig(format=FormatConfig(max_items=1))
    set_config(custom)
    assert get_config() is custom
    reset_config()
    assert get_config() == AssertConfig()
