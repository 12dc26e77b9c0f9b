"""Unit tests for the settings loader in api/settings.py."""

import logging
from pathlib import Path

import pytest

from api.settings import DEFAULT_DRAWINGS_ROOT, load_settings


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch, tmp_path):
    """Run each test without inherited settings or a stray .env file."""
    for name in ["DRAWINGS_ROOT", "DRAWINGS_CREATE_ROOT", "DRAWINGS_LOG_LEVEL"]:
        # set first so undo also removes values a .env file loads
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)


class TestLoadSettings:
    """Tests for load_settings()."""

    def test_defaults(self):
        settings = load_settings()

        assert settings.drawings_root == Path(DEFAULT_DRAWINGS_ROOT)
        assert settings.create_root is True
        assert settings.log_level == logging.INFO

    def test_root_from_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv("DRAWINGS_ROOT", str(tmp_path / "d"))

        assert load_settings().drawings_root == tmp_path / "d"

    def test_root_expands_user(self, monkeypatch, tmp_path):
        monkeypatch.setenv("HOME", str(tmp_path))
        monkeypatch.setenv("DRAWINGS_ROOT", "~/drawings")

        assert load_settings().drawings_root == tmp_path / "drawings"

    def test_root_from_dotenv_file(self, tmp_path):
        (tmp_path / ".env").write_text(f"DRAWINGS_ROOT={tmp_path / 'dotenv-root'}\n")

        assert load_settings().drawings_root == tmp_path / "dotenv-root"

    @pytest.mark.parametrize("value, expected", [("false", False), ("0", False), ("YES", True)])
    def test_create_root_flag(self, monkeypatch, value, expected):
        monkeypatch.setenv("DRAWINGS_CREATE_ROOT", value)

        assert load_settings().create_root is expected

    def test_invalid_bool_names_variable(self, monkeypatch):
        monkeypatch.setenv("DRAWINGS_CREATE_ROOT", "maybe")

        with pytest.raises(ValueError, match="DRAWINGS_CREATE_ROOT"):
            load_settings()

    @pytest.mark.parametrize("value, expected", [("debug", logging.DEBUG), ("30", 30)])
    def test_log_level(self, monkeypatch, value, expected):
        monkeypatch.setenv("DRAWINGS_LOG_LEVEL", value)

        assert load_settings().log_level == expected

    def test_invalid_log_level_names_variable(self, monkeypatch):
        monkeypatch.setenv("DRAWINGS_LOG_LEVEL", "chatty")

        with pytest.raises(ValueError, match="DRAWINGS_LOG_LEVEL"):
            load_settings()
