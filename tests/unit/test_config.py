"""Unit tests for EnvtierSettings configuration."""

import pytest
from pydantic import ValidationError

from envtier.config import (
    FILE_NAME,
    FILE_TRIM_CHARACTERS,
    NATIVE_INT_BITS,
    TRIM_CHARACTERS,
    EnvtierSettings,
    get_settings,
)


class TestEnvtierSettingsDefaults:
    """Tests for EnvtierSettings default values."""

    def test_default_file_name(self, settings: EnvtierSettings):
        assert settings.file_name == FILE_NAME == ".env"

    def test_default_encoding(self, settings: EnvtierSettings):
        assert settings.file_encoding == "utf-8"

    def test_default_trim_sets(self, settings: EnvtierSettings):
        assert settings.trim_characters == TRIM_CHARACTERS == " \n\t"
        assert settings.file_trim_characters == FILE_TRIM_CHARACTERS == ' ,\t;#"'

    def test_default_log_level_key(self, settings: EnvtierSettings):
        assert settings.log_level_key == "LOG_LEVEL"

    def test_default_int_bits_is_native(self, settings: EnvtierSettings):
        assert settings.int_bits == NATIVE_INT_BITS
        assert NATIVE_INT_BITS in (32, 64)


class TestEnvtierSettingsEnvOverrides:
    """Tests for ENVTIER_* overrides."""

    def test_file_name_override(self, monkeypatch):
        monkeypatch.setenv("ENVTIER_FILE_NAME", ".env.local")
        assert EnvtierSettings().file_name == ".env.local"

    def test_int_bits_override(self, monkeypatch):
        monkeypatch.setenv("ENVTIER_INT_BITS", "32")
        assert EnvtierSettings().int_bits == 32

    def test_log_level_key_override(self, monkeypatch):
        monkeypatch.setenv("ENVTIER_LOG_LEVEL_KEY", "APP_LOG")
        assert EnvtierSettings().log_level_key == "APP_LOG"


class TestEnvtierSettingsValidation:
    """Invalid settings are rejected."""

    def test_invalid_int_bits(self):
        with pytest.raises(ValidationError):
            EnvtierSettings(int_bits=12)

    def test_blank_file_name(self):
        with pytest.raises(ValidationError):
            EnvtierSettings(file_name="  ")


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
