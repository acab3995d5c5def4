"""Tests for the command-line entry point."""

import json
from pathlib import Path

import pytest
import yaml

from doctree.doctree_cli import main

DUMP = {
    "type": "Program",
    "body": [
        {
            "type": "ClassDeclaration",
            "id": {"type": "Identifier", "name": "Kutta"},
            "tags": [{"name": "description", "value": "Disturbed?"}],
            "body": {
                "type": "ClassBody",
                "body": [
                    {
                        "type": "ClassProperty",
                        "key": {"type": "Identifier", "name": "hidden"},
                        "tags": [{"name": "private"}],
                    }
                ],
            },
        }
    ],
}


def test_cli_writes_yaml(tmp_path: Path) -> None:
    """Verify that the CLI builds the tree and writes YAML output."""
    dump = tmp_path / "dump.yml"
    dump.write_text(yaml.safe_dump(DUMP))
    out = tmp_path / "out" / "tree.yml"

    assert main([str(dump), "--out", str(out)]) == 0

    data = yaml.safe_load(out.read_text(encoding="utf-8"))
    (kutta,) = data["children"]
    assert kutta["path"] == "Kutta"
    assert kutta["description"] == "Disturbed?"
    assert kutta["children"][0]["visibility"] == "private"


def test_cli_json_and_config(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Verify JSON output to stdout with private members hidden by config."""
    dump = tmp_path / "dump.json"
    dump.write_text(json.dumps(DUMP))
    config = tmp_path / "config.yml"
    config.write_text(yaml.safe_dump({"output": {"include_private": False}}))

    assert main([str(dump), "--format", "json", "--config", str(config)]) == 0

    data = json.loads(capsys.readouterr().out)
    assert "children" not in data["children"][0]


def test_cli_missing_input(tmp_path: Path) -> None:
    """Verify that a missing input file stops the run with a message."""
    with pytest.raises(SystemExit, match="not found"):
        main([str(tmp_path / "absent.yml")])


def test_cli_malformed_input(tmp_path: Path) -> None:
    """Verify that unreadable dumps are reported instead of crashing."""
    dump = tmp_path / "bad.yml"
    dump.write_text(yaml.safe_dump({"body": []}))
    with pytest.raises(SystemExit, match="Could not read"):
        main([str(dump)])
