"""Unit tests for config.py — building Settings from the environment."""

import pytest
from pydantic import ValidationError

from config import DEFAULT_PORT, load_settings
from errors import ConfigError

BASE_ENV = {"DISCORD_TOKEN": "discord-token", "TARGET_URL": "http://backend.test/chat"}


class TestLoadSettings:
    def test_required_values(self):
        settings = load_settings(BASE_ENV)
        assert settings.discord_token == "discord-token"
        assert settings.target_url == "http://backend.test/chat"

    def test_defaults(self):
        settings = load_settings(BASE_ENV)
        assert settings.port == DEFAULT_PORT == 8080
        assert settings.host == "0.0.0.0"
        assert settings.log_level == "INFO"

    def test_custom_port(self):
        settings = load_settings({**BASE_ENV, "PORT": "9000"})
        assert settings.port == 9000

    def test_blank_port_uses_default(self):
        settings = load_settings({**BASE_ENV, "PORT": ""})
        assert settings.port == 8080

    def test_log_level_is_uppercased(self):
        assert load_settings({**BASE_ENV, "LOG_LEVEL": "debug"}).log_level == "DEBUG"

    def test_settings_are_immutable(self):
        settings = load_settings(BASE_ENV)
        with pytest.raises(ValidationError):
            settings.port = 1


class TestInvalidSettings:
    @pytest.mark.parametrize("missing", ["DISCORD_TOKEN", "TARGET_URL"])
    def test_missing_required(self, missing):
        env = {k: v for k, v in BASE_ENV.items() if k != missing}
        with pytest.raises(ConfigError) as exc:
            load_settings(env)
        assert missing in str(exc.value)

    def test_blank_required_counts_as_missing(self):
        with pytest.raises(ConfigError):
            load_settings({**BASE_ENV, "DISCORD_TOKEN": "   "})

    @pytest.mark.parametrize("port", ["abc", "80.5", "0", "-1", "65536"])
    def test_invalid_port(self, port):
        with pytest.raises(ConfigError) as exc:
            load_settings({**BASE_ENV, "PORT": port})
        assert "PORT" in str(exc.value)
