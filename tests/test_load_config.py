"""Tests for configuration loading and merging."""

from pathlib import Path

import yaml

from doctree.deep_merge import deep_merge
from doctree.load_config import DEFAULT_CONFIG, load_config


def test_deep_merge_scalars() -> None:
    """Verify scalar replacement in deep merge."""
    base = {"a": 1, "b": 2}
    update = {"b": 3, "c": 4}
    merged = deep_merge(base, update)
    assert merged == {"a": 1, "b": 3, "c": 4}


def test_deep_merge_nested() -> None:
    """Verify recursive merging of dictionaries."""
    base = {"nested": {"x": 1, "y": 2}}
    update = {"nested": {"y": 3, "z": 4}}
    merged = deep_merge(base, update)
    assert merged == {"nested": {"x": 1, "y": 3, "z": 4}}


def test_deep_merge_arrays_replace() -> None:
    """Verify that arrays are replaced by default."""
    base = {"arr": [1, 2]}
    update = {"arr": [3, 4]}
    merged = deep_merge(base, update)
    assert merged == {"arr": [3, 4]}


def test_deep_merge_custom_tags_additive() -> None:
    """Verify that the custom_tags list is merged additively."""
    base = {"custom_tags": ["see", "todo"]}
    update = {"custom_tags": ["todo", "emitter"]}
    merged = deep_merge(base, update)
    assert merged["custom_tags"] == ["see", "todo", "emitter"]


def test_deep_merge_custom_additive_keys() -> None:
    """Verify that the set of additive keys can be chosen by the caller."""
    base = {"custom_tags": ["see"], "extra": [1]}
    update = {"custom_tags": ["todo"], "extra": [2]}
    merged = deep_merge(base, update, additive=frozenset({"extra"}))
    assert merged == {"custom_tags": ["todo"], "extra": [1, 2]}


def test_load_config_defaults() -> None:
    """Verify that default config is loaded when no path is provided."""
    config = load_config(None)
    assert config["assembly"]["warn_unattached_tags"] is True
    assert config["output"]["include_private"] is True


def test_load_config_does_not_share_defaults() -> None:
    """Verify that mutating a loaded config leaves the defaults alone."""
    config = load_config(None)
    config["output"]["include_private"] = False
    assert DEFAULT_CONFIG["output"]["include_private"] is True


def test_load_config_with_file(tmp_path: Path) -> None:
    """Verify that user config correctly overrides defaults."""
    config_file = tmp_path / "config.yml"
    config_data = {
        "output": {"include_private": False},
        "custom_tags": ["emitter"],
    }
    config_file.write_text(yaml.dump(config_data))

    loaded = load_config(str(config_file))
    assert loaded["output"]["include_private"] is False
    assert loaded["output"]["include_tags"] is False  # Default
    assert "see" in loaded["custom_tags"]  # Default
    assert "emitter" in loaded["custom_tags"]  # Added


def test_load_config_missing_file(tmp_path: Path) -> None:
    """Verify that a missing config path falls back to defaults."""
    loaded = load_config(str(tmp_path / "absent.yml"))
    assert loaded == DEFAULT_CONFIG
