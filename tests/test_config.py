"""Tests for environment overrides in pathviz.config."""

import logging

from pathviz import config


class TestEnvInt:
    """PATHVIZ_* integer overrides."""

    def test_valid_value(self, monkeypatch):
        monkeypatch.setenv("PATHVIZ_GRID_SIZE", "12")
        assert config._env_int("PATHVIZ_GRID_SIZE", 30) == 12

    def test_missing_or_blank_uses_default_quietly(self, monkeypatch, caplog):
        monkeypatch.delenv("PATHVIZ_GRID_SIZE", raising=False)
        monkeypatch.setenv("PATHVIZ_STEP_DELAY_MS", "  ")
        with caplog.at_level(logging.WARNING, logger="pathviz.config"):
            assert config._env_int("PATHVIZ_GRID_SIZE", 30) == 30
            assert config._env_int("PATHVIZ_STEP_DELAY_MS", 20) == 20
        assert caplog.records == []

    def test_bad_value_warns_and_uses_default(self, monkeypatch, caplog):
        monkeypatch.setenv("PATHVIZ_STEP_DELAY_MS", "fast")
        with caplog.at_level(logging.WARNING, logger="pathviz.config"):
            assert config._env_int("PATHVIZ_STEP_DELAY_MS", 20) == 20
        assert len(caplog.records) == 1
        msg = caplog.records[0].getMessage()
        assert "PATHVIZ_STEP_DELAY_MS" in msg
        assert "'fast'" in msg
