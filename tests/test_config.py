"""Tests for environment overrides in the config module."""

import importlib
import os

import pytest

from holidays_jp_api import config


@pytest.fixture
def reload_config(monkeypatch):
    yield lambda: importlib.reload(config)
    monkeypatch.undo()
    importlib.reload(config)


class TestDataPaths:
    def test_defaults_beside_package(self, monkeypatch, reload_config):
        monkeypatch.delenv("HOLIDAYS_DATA_DIR", raising=False)
        monkeypatch.delenv("HOLIDAYS_GENERATED_TABLE_FILE", raising=False)
        cfg = reload_config()
        assert cfg.RAW_DATA_FILE == os.path.join(cfg.BASE_DIR, "data", "syukujitsu.csv")
        assert cfg.GENERATED_TABLE_FILE.endswith(os.path.join("data", "holidays_generated.py"))

    def test_raw_data_dir_override(self, monkeypatch, tmp_path, reload_config):
        monkeypatch.setenv("HOLIDAYS_DATA_DIR", str(tmp_path))
        cfg = reload_config()
        assert cfg.DATA_DIR == str(tmp_path)
        assert cfg.RAW_DATA_FILE == os.path.join(str(tmp_path), "syukujitsu.csv")

    def test_generated_table_override(self, monkeypatch, tmp_path, reload_config):
        target = str(tmp_path / "holidays_generated.py")
        monkeypatch.setenv("HOLIDAYS_GENERATED_TABLE_FILE", target)
        cfg = reload_config()
        assert cfg.GENERATED_TABLE_FILE == target
