"""
Unit tests for settings and client configuration.
"""
import logging

import pytest
from pydantic import ValidationError

from core import config as config_module
from core.config import (
    JSON_CONTENT_TYPE,
    AppSettings,
    Environment,
    build_client_configuration,
    get_app_logger,
    write_user_env_vars,
)


class TestAppSettings:
    def test_defaults(self):
        settings = AppSettings(_env_file=None)
        assert settings.api_base_url == "https://api.github.com"
        assert settings.page_size == 20
        assert settings.environment is Environment.UAT

    def test_reads_prefixed_env(self, monkeypatch):
        monkeypatch.setenv("GITHUB_USERS_API_BASE_URL", "https://ghe.example.test/api/v3")
        monkeypatch.setenv("GITHUB_USERS_PAGE_SIZE", "50")
        settings = AppSettings(_env_file=None)
        assert settings.api_base_url == "https://ghe.example.test/api/v3"
        assert settings.page_size == 50

    @pytest.mark.parametrize("value", ["not a url", "ftp://example.test", "https://"])
    def test_invalid_base_url_is_fatal(self, value):
        with pytest.raises(ValidationError):
            AppSettings(_env_file=None, api_base_url=value)

    def test_log_level_is_normalized(self):
        assert AppSettings(_env_file=None, log_level="debug").log_level == "DEBUG"

    def test_unknown_log_level(self):
        with pytest.raises(ValidationError):
            AppSettings(_env_file=None, log_level="chatty")


class TestClientConfiguration:
    def test_json_content_type_and_base_url(self):
        settings = AppSettings(_env_file=None, api_base_url="https://api.example.test", api_token=None)
        configuration = build_client_configuration(settings)
        assert configuration.base_url == "https://api.example.test"
        assert configuration.base_headers["Content-Type"] == JSON_CONTENT_TYPE
        assert "Authorization" not in configuration.base_headers

    def test_token_becomes_bearer_header(self):
        settings = AppSettings(_env_file=None, api_token="secret")
        configuration = build_client_configuration(settings)
        assert configuration.base_headers["Authorization"] == "Bearer secret"


def test_app_logger_name_follows_environment():
    settings = AppSettings(_env_file=None, environment="prod")
    logger = get_app_logger(settings)
    assert isinstance(logger, logging.Logger)
    assert logger.name == "github_users.prod"


def test_write_user_env_vars_merges(tmp_path, monkeypatch):
    env_path = tmp_path / "github-users" / ".env"
    monkeypatch.setattr(config_module, "get_user_env_file", lambda: env_path)

    write_user_env_vars({"GITHUB_USERS_PAGE_SIZE": "30"})
    write_user_env_vars({"GITHUB_USERS_API_TOKEN": "abc"})

    text = env_path.read_text(encoding="utf-8")
    assert "GITHUB_USERS_PAGE_SIZE=30" in text
    assert "GITHUB_USERS_API_TOKEN=abc" in text
