"""
Tests for config.py - environment-driven settings.
"""

import logging
import os
import sys
from pathlib import Path
from unittest.mock import patch

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import config


class TestLevelPath:
    def test_default_level(self, monkeypatch):
        monkeypatch.delenv("PACSNEK_LEVEL", raising=False)
        assert config.get_level_path() == config.DEFAULT_LEVEL_PATH
        assert config.DEFAULT_LEVEL_PATH.exists()

    def test_level_from_environment(self, monkeypatch):
        monkeypatch.setenv("PACSNEK_LEVEL", "/tmp/custom-level.txt")
        assert config.get_level_path() == Path("/tmp/custom-level.txt")


class TestLogging:
    def test_default_log_level(self, monkeypatch):
        monkeypatch.delenv("PACSNEK_LOG_LEVEL", raising=False)
        assert config.get_log_level() == "INFO"

    def test_log_level_from_environment(self, monkeypatch):
        monkeypatch.setenv("PACSNEK_LOG_LEVEL", "debug")
        assert config.get_log_level() == "DEBUG"

    def test_configure_logging(self, monkeypatch):
        monkeypatch.setenv("PACSNEK_LOG_LEVEL", "warning")
        with patch.object(logging, "basicConfig") as basic_config:
            config.configure_logging()
        basic_config.assert_called_once_with(level="WARNING", format=config.LOG_FORMAT)

    def test_configure_logging_explicit_level(self):
        with patch.object(logging, "basicConfig") as basic_config:
            config.configure_logging("ERROR")
        basic_config.assert_called_once_with(level="ERROR", format=config.LOG_FORMAT)
