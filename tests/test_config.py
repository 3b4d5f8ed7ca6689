"""
Configuration and Logging Tests
"""

import logging
import pytest
from pydantic import ValidationError

from marketplace.utils.config import AppConfig
from marketplace.utils.logger import DEFAULT_LOGGING_CONFIG, load_logging_config, setup_logging


class TestAppConfig:
    def test_defaults(self, app_config):
        assert app_config.api_prefix == "/api"
        assert app_config.port == 3000
        assert app_config.get_cors_origins() == [
            "http://localhost:8080", "http://127.0.0.1:8080", "null"
        ]

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("APP_PORT", "8081")
        monkeypatch.setenv("APP_CORS_ALLOWED_ORIGINS", "https://a.example, https://b.example")

        config = AppConfig(_env_file=None)

        assert config.port == 8081
        assert config.get_cors_origins() == ["https://a.example", "https://b.example"]

    def test_invalid_port(self):
        with pytest.raises(ValidationError):
            AppConfig(_env_file=None, port=70000)

    def test_invalid_log_format(self):
        with pytest.raises(ValidationError):
            AppConfig(_env_file=None, log_format="xml")


class TestLogging:
    def test_default_config_is_a_copy(self):
        config = load_logging_config()
        config['handlers']['console']['level'] = 'DEBUG'
        assert DEFAULT_LOGGING_CONFIG['handlers']['console']['level'] == 'INFO'

    def test_yaml_config_file(self, tmp_path):
        path = tmp_path / "logging.yml"
        path.write_text(
            "version: 1\n"
            "handlers:\n"
            "  console:\n"
            "    class: logging.StreamHandler\n"
            "    level: INFO\n"
            "loggers:\n"
            "  marketplace:\n"
            "    level: INFO\n"
            "    handlers: [console]\n"
        )

        config = load_logging_config(str(path))

        assert 'formatters' not in config
        assert config['loggers']['marketplace']['handlers'] == ['console']

    def test_missing_file_falls_back_to_default(self, tmp_path):
        config = load_logging_config(str(tmp_path / "absent.yml"))
        assert config == DEFAULT_LOGGING_CONFIG

    def test_level_and_format_overrides(self):
        config = setup_logging(log_level="warning", log_format="json")

        assert config['loggers']['marketplace']['level'] == 'WARNING'
        assert config['handlers']['console']['formatter'] == 'json'
        assert logging.getLogger('marketplace').level == logging.WARNING
