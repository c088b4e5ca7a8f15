"""
Management commands used by manage.py and external schedulers.
"""

import pytest

from moderation_api import commands
from moderation_api.base.errors import StoreError


class TestRunCleanup:
    def test_prints_count(self, monkeypatch, capsys):
        async def fake_with_store(operation, path=None):
            return 2

        monkeypatch.setattr(commands, "with_store", fake_with_store)
        commands.run_cleanup()
        assert capsys.readouterr().out.strip() == "Marked 2 expired moderations as inactive"

    def test_store_error_exits(self, monkeypatch):
        async def fake_with_store(operation, path=None):
            raise StoreError("connection refused")

        monkeypatch.setattr(commands, "with_store", fake_with_store)
        with pytest.raises(SystemExit) as info:
            commands.run_cleanup()
        assert "connection refused" in str(info.value)


class TestRunInitDb:
    def test_prints_confirmation(self, monkeypatch, capsys):
        async def fake_with_store(operation, path=None):
            return None

        monkeypatch.setattr(commands, "with_store", fake_with_store)
        commands.run_init_db()
        assert "Database initialized successfully" in capsys.readouterr().out


class TestConfigPath:
    def test_env_override(self, monkeypatch):
        monkeypatch.setattr(commands, "load_dotenv", lambda: None)
        monkeypatch.setenv("CONFIG_PATH", "/tmp/other.yaml")
        assert commands.config_path() == "/tmp/other.yaml"

    def test_default_points_at_etc(self, monkeypatch):
        monkeypatch.setattr(commands, "load_dotenv", lambda: None)
        monkeypatch.delenv("CONFIG_PATH", raising=False)
        assert commands.config_path().endswith("etc/config.yaml")
