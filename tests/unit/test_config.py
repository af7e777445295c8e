"""Unit tests for regexcatalog/config.py."""

from __future__ import annotations

import pydantic
import pytest

from regexcatalog.config import Settings, get_settings


class TestDefaults:
    def test_defaults(self):
        settings = Settings(_env_file=None)
        assert settings.self_check is True
        assert settings.legacy_warning is True
        assert settings.compile_cache_size == 256

    def test_cached_singleton(self):
        assert get_settings() is get_settings()

    def test_cache_clear_rereads_environment(self, monkeypatch):
        assert get_settings().self_check is True
        monkeypatch.setenv("REGEXCATALOG_SELF_CHECK", "false")
        assert get_settings().self_check is True
        get_settings.cache_clear()
        assert get_settings().self_check is False


class TestEnvironment:
    def test_prefixed_variables(self, monkeypatch):
        monkeypatch.setenv("REGEXCATALOG_LEGACY_WARNING", "false")
        monkeypatch.setenv("REGEXCATALOG_COMPILE_CACHE_SIZE", "32")
        settings = Settings(_env_file=None)
        assert settings.legacy_warning is False
        assert settings.compile_cache_size == 32

    def test_case_insensitive(self, monkeypatch):
        monkeypatch.setenv("regexcatalog_self_check", "no")
        assert Settings(_env_file=None).self_check is False

    def test_unprefixed_variables_ignored(self, monkeypatch):
        monkeypatch.setenv("SELF_CHECK", "false")
        assert Settings(_env_file=None).self_check is True

    @pytest.mark.parametrize("value", ["0", "-1", "65537", "lots"])
    def test_invalid_cache_size(self, monkeypatch, value):
        monkeypatch.setenv("REGEXCATALOG_COMPILE_CACHE_SIZE", value)
        with pytest.raises(pydantic.ValidationError):
            Settings(_env_file=None)

    def test_env_file(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text(
            "REGEXCATALOG_COMPILE_CACHE_SIZE=8\nUNRELATED_KEY=value\n",
            encoding="utf-8",
        )
        settings = Settings(_env_file=env_file)
        assert settings.compile_cache_size == 8
