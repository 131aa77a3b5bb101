"""Test Settings loading and the settings-driven middleware stack."""

import pytest

from reductor.core.config import Settings, load_settings
from reductor.core.errors import ConfigError
from reductor.middleware.defaults import middleware_from_settings
from reductor.middleware.thunk import thunk


class TestSettingsLoadFromDict:
    def test_default_settings(self):
        settings = Settings()
        assert settings.observability.log_level == "INFO"
        assert settings.observability.log_format == "json"
        assert settings.middleware.log_actions is True
        assert settings.middleware.log_state is False

    def test_overrides(self):
        settings = load_settings(
            overrides={"observability": {"log_level": "debug", "log_format": "console"}}
        )
        assert settings.observability.log_level == "DEBUG"
        assert settings.observability.log_format == "console"

    def test_invalid_log_level(self):
        with pytest.raises(ConfigError, match="log level"):
            load_settings(overrides={"observability": {"log_level": "LOUD"}})

    def test_invalid_log_format(self):
        with pytest.raises(ConfigError):
            load_settings(overrides={"observability": {"log_format": "xml"}})


class TestLoadFromToml:
    def test_reads_file(self, tmp_path):
        path = tmp_path / "reductor.toml"
        path.write_text(
            "[observability]\n"
            'log_level = "WARNING"\n'
            "\n"
            "[middleware]\n"
            "log_state = true\n"
        )
        settings = load_settings(path)
        assert settings.observability.log_level == "WARNING"
        assert settings.middleware.log_state is True

    def test_missing_file_uses_defaults(self, tmp_path):
        settings = load_settings(tmp_path / "absent.toml")
        assert settings == Settings()

    def test_overrides_win_over_file(self, tmp_path):
        path = tmp_path / "reductor.toml"
        path.write_text('[middleware]\nlog_actions = true\n')
        settings = load_settings(path, overrides={"middleware": {"log_actions": False}})
        assert settings.middleware.log_actions is False

    def test_malformed_toml(self, tmp_path):
        path = tmp_path / "broken.toml"
        path.write_text("[middleware\n")
        with pytest.raises(ConfigError, match="Invalid TOML"):
            load_settings(path)


class TestEnvironment:
    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("REDUCTOR_OBSERVABILITY__LOG_LEVEL", "ERROR")
        monkeypatch.setenv("REDUCTOR_MIDDLEWARE__LOG_ACTIONS", "false")
        settings = Settings()
        assert settings.observability.log_level == "ERROR"
        assert settings.middleware.log_actions is False


class TestMiddlewareFromSettings:
    def test_thunk_and_logger_by_default(self):
        chain = middleware_from_settings(Settings())
        assert chain[0] is thunk
        assert len(chain) == 2

    def test_logger_disabled(self):
        settings = Settings(middleware={"log_actions": False})
        assert middleware_from_settings(settings) == [thunk]
