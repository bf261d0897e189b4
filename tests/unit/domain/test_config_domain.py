from __future__ import annotations

"""
Unit tests for the Config Domain.

Verifies:
1. Default configuration generation.
2. Resilience against corrupted config files.
3. Sections outside the state schema are ignored.
4. Persistence (Save/Load) without touching real user data.
"""

import json
from unittest.mock import patch

import pytest

from treetext.domain.config import (
    get_default_app_state,
    get_default_config,
    load_app_state,
    load_config,
    save_config,
)
from treetext.domain.constants import CURRENT_CONFIG_VERSION


@pytest.fixture
def config_path(tmp_path):
    """Redirect the state file into a temporary directory."""
    path = tmp_path / "TreeText" / "config.json"
    with patch("treetext.domain.config.CONFIG_FILE", str(path)):
        yield path


def test_load_fresh_state_returns_defaults(config_path):
    assert not config_path.exists()

    state = load_app_state()

    assert state == get_default_app_state()
    assert state["version"] == CURRENT_CONFIG_VERSION


def test_load_corrupted_file_returns_defaults(config_path):
    config_path.parent.mkdir(parents=True)
    config_path.write_text("{ incomplete json ", encoding="utf-8")

    state = load_app_state()

    assert state["last_session"] == get_default_config()


def test_load_non_dict_file_returns_defaults(config_path):
    config_path.parent.mkdir(parents=True)
    config_path.write_text("[1, 2, 3]", encoding="utf-8")

    assert load_app_state() == get_default_app_state()


def test_top_level_render_keys_are_not_read_as_session(config_path):
    raw = json.dumps({"format": "xml", "root_dot": False})
    config_path.parent.mkdir(parents=True)
    config_path.write_text(raw, encoding="utf-8")

    state = load_app_state()

    assert state["last_session"] == get_default_config()
    assert config_path.read_text(encoding="utf-8") == raw


def test_save_then_load_round_trip(config_path):
    save_config({"format": "markdown", "full_path": True})

    cfg = load_config()

    assert cfg["format"] == "markdown"
    assert cfg["full_path"] is True
    assert cfg["charset"] == "utf-8"


def test_stored_values_merge_over_new_defaults(config_path):
    config_path.parent.mkdir(parents=True)
    config_path.write_text(
        json.dumps({"version": "0.9.0", "last_session": {"charset": "ascii"}}),
        encoding="utf-8",
    )

    state = load_app_state()

    assert state["version"] == CURRENT_CONFIG_VERSION
    assert state["last_session"]["charset"] == "ascii"
    assert state["last_session"]["root_dot"] is True


def test_get_default_config_completeness():
    defaults = get_default_config()

    for key in ("format", "charset", "trailing_dir_slash", "full_path", "root_dot", "strict_format"):
        assert key in defaults
