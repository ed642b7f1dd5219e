"""Tests for rwenv.config module"""

import logging
from pathlib import Path

import pytest

from rwenv.config import DisplaySettings, LogSettings, Settings, load_settings
from rwenv.exceptions import ConfigurationError


class TestLogSettings:
    """Tests for LogSettings dataclass"""

    def test_default_values(self):
        settings = LogSettings()
        assert settings.level == "WARNING"
        assert settings.format == "text"
        assert settings.file is None
        assert settings.numeric_level == logging.WARNING
        assert settings.json_format is False

    def test_from_env(self):
        settings = LogSettings.from_env(
            {
                "RWENV_LOG_LEVEL": "debug",
                "RWENV_LOG_FORMAT": "JSON",
                "RWENV_LOG_FILE": "/tmp/rwenv.log",
            }
        )
        assert settings.level == "DEBUG"
        assert settings.numeric_level == logging.DEBUG
        assert settings.json_format is True
        assert settings.file == "/tmp/rwenv.log"

    def test_empty_log_file_means_none(self):
        assert LogSettings.from_env({"RWENV_LOG_FILE": ""}).file is None

    def test_custom_prefix(self):
        settings = LogSettings.from_env({"OTHER_LOG_LEVEL": "ERROR"}, prefix="OTHER")
        assert settings.level == "ERROR"

    def test_invalid_level(self):
        with pytest.raises(ConfigurationError) as exc_info:
            LogSettings(level="LOUD")
        assert exc_info.value.code == "INVALID_SETTING"
        assert exc_info.value.details["key"] == "RWENV_LOG_LEVEL"

    def test_invalid_format(self):
        with pytest.raises(ConfigurationError):
            LogSettings(format="xml")


class TestDisplaySettings:
    """Tests for DisplaySettings dataclass"""

    def test_default_values(self):
        settings = DisplaySettings()
        assert settings.max_value_len == 100
        assert settings.clip is True

    def test_from_empty_env(self):
        assert DisplaySettings.from_env({}) == DisplaySettings()

    def test_from_env(self):
        settings = DisplaySettings.from_env({"RWENV_MAX_VALUE_LEN": "40", "RWENV_CLIP": "no"})
        assert settings.max_value_len == 40
        assert settings.clip is False

    @pytest.mark.parametrize("raw", ["1", "true", "YES", "on"])
    def test_truthy_clip(self, raw):
        assert DisplaySettings.from_env({"RWENV_CLIP": raw}).clip is True

    @pytest.mark.parametrize("raw", ["0", "False", "no", "OFF"])
    def test_falsy_clip(self, raw):
        assert DisplaySettings.from_env({"RWENV_CLIP": raw}).clip is False

    def test_invalid_clip(self):
        with pytest.raises(ConfigurationError):
            DisplaySettings.from_env({"RWENV_CLIP": "maybe"})

    def test_non_integer_length(self):
        with pytest.raises(ConfigurationError) as exc_info:
            DisplaySettings.from_env({"RWENV_MAX_VALUE_LEN": "wide"})
        assert "RWENV_MAX_VALUE_LEN" in exc_info.value.message

    def test_too_small_length(self):
        with pytest.raises(ConfigurationError):
            DisplaySettings.from_env({"RWENV_MAX_VALUE_LEN": "3"})


class TestSettings:
    """Tests for the aggregate Settings"""

    def test_defaults(self):
        settings = Settings()
        assert settings.log == LogSettings()
        assert settings.display == DisplaySettings()

    def test_from_env(self):
        settings = Settings.from_env({"RWENV_LOG_LEVEL": "INFO", "RWENV_CLIP": "false"})
        assert settings.log.level == "INFO"
        assert settings.display.clip is False


class TestLoadSettings:
    """Tests for load_settings"""

    def test_from_process_environment(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("RWENV_MAX_VALUE_LEN", "12")
        assert load_settings().display.max_value_len == 12

    def test_settings_file(self, tmp_path: Path):
        settings_file = tmp_path / "rwenv.env"
        settings_file.write_text("RWENV_MAX_VALUE_LEN=20\nRWENV_CLIP=false\n")

        settings = load_settings({"RWENV_CONFIG": str(settings_file), "RWENV_CLIP": "true"})

        assert settings.display.max_value_len == 20
        assert settings.display.clip is True

    def test_missing_settings_file_ignored(self, tmp_path: Path):
        settings = load_settings({"RWENV_CONFIG": str(tmp_path / "missing")})
        assert settings == Settings()

    def test_bad_value_in_settings_file(self, tmp_path: Path):
        settings_file = tmp_path / "rwenv.env"
        settings_file.write_text("RWENV_LOG_FORMAT=yaml\n")

        with pytest.raises(ConfigurationError):
            load_settings({"RWENV_CONFIG": str(settings_file)})
