"""Tests for CLI configuration."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from hooks_builder.errors import ConfigError
from hooks_cli import config


@pytest.fixture(autouse=True)
def fresh_settings(tmp_path: Path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    config.get_settings.cache_clear()
    yield
    config.get_settings.cache_clear()


class TestConfig:
    def test_hosts_from_environment(self):
        env = {"HOOKS_COMPILE_HOST": "https://builder.example.com/", "HOOKS_DEBUG_HOST": "wss://debug.example.com"}
        with patch.dict(os.environ, env, clear=True):
            assert config.get_compile_host() == "https://builder.example.com"
            assert config.get_debug_host() == "wss://debug.example.com"

    def test_missing_host(self):
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(ConfigError, match="HOOKS_COMPILE_HOST"):
                config.get_compile_host()

    def test_dotenv_file(self, tmp_path: Path):
        (tmp_path / ".env").write_text("HOOKS_COMPILE_HOST=http://from-dotenv\nUNRELATED=1\n", encoding="utf-8")

        with patch.dict(os.environ, {}, clear=True):
            assert config.get_compile_host() == "http://from-dotenv"

    def test_timeout(self):
        with patch.dict(os.environ, {"HOOKS_COMPILE_TIMEOUT": "30"}, clear=True):
            assert config.get_compile_timeout() == 30.0
