"""
Unit tests for scripts/store_json.py.

Run: pytest tests/unit/test_store_json_script.py -v
"""

import importlib.util
import json
from pathlib import Path

import pytest

from tests.factories import read_store

SCRIPT_PATH = Path(__file__).parent.parent.parent / "scripts" / "store_json.py"


@pytest.fixture
def store_json():
    spec = importlib.util.spec_from_file_location("store_json", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class TestStoreJsonScript:
    """Tests for the store_json command."""

    def test_stores_under_given_key(self, store_json, app_env, tmp_path, capsys):
        payload = tmp_path / "payload.json"
        payload.write_text(json.dumps({"from": "file"}), encoding="utf-8")

        exit_code = store_json.main([str(payload), "--key", "cli-key"])

        assert exit_code == 0
        mappings = read_store(app_env["data_file"])["mappings"]
        assert mappings[0]["key"] == "cli-key"
        assert mappings[0]["data"] == {"from": "file"}
        assert "/getData?id=cli-key" in capsys.readouterr().out

    def test_generates_key_when_omitted(self, store_json, app_env, tmp_path):
        payload = tmp_path / "payload.json"
        payload.write_text("[1, 2]", encoding="utf-8")

        assert store_json.main([str(payload)]) == 0

        key = read_store(app_env["data_file"])["mappings"][0]["key"]
        assert len(key) == 11

    def test_invalid_json_fails(self, store_json, app_env, tmp_path, capsys):
        payload = tmp_path / "payload.json"
        payload.write_text("{nope", encoding="utf-8")

        assert store_json.main([str(payload), "--key", "k"]) == 1
        assert "Invalid JSON data provided" in capsys.readouterr().err

    def test_missing_file_fails(self, store_json, app_env, tmp_path):
        assert store_json.main([str(tmp_path / "absent.json"), "--key", "k"]) == 1
