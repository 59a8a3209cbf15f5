"""
Pytest tests for LoggerConfig and environment loading.
"""

from __future__ import annotations

import pytest

from service_logger.config import LoggerConfig, config_from_env


def test_defaults_from_empty_environ():
    """No variables set: info level, JSON enabled, development mode."""
    config = config_from_env({})
    assert config == LoggerConfig(level="info", disable_json=False, environment="development")
    assert config.is_production is False


def test_log_level_is_case_insensitive():
    assert config_from_env({"LOG_LEVEL": "DEBUG"}).level == "debug"
    assert config_from_env({"LOG_LEVEL": " warn "}).level == "warn"


def test_unknown_log_level_falls_back_to_info():
    assert config_from_env({"LOG_LEVEL": "verbose"}).level == "info"


@pytest.mark.parametrize(
    "raw,expected",
    [("1", True), ("true", True), ("YES", True), ("on", True), ("0", False), ("false", False), ("", False)],
)
def test_disable_json_flag(raw, expected):
    assert config_from_env({"LOG_DISABLE_JSON": raw}).disable_json is expected


def test_environment_mode():
    """Only 'production' is production; anything else is treated as development."""
    assert config_from_env({"APP_ENV": "production"}).is_production is True
    assert config_from_env({"APP_ENV": "staging"}).is_production is False
    assert config_from_env({"APP_ENV": "staging"}).environment == "staging"


def test_config_rejects_unknown_level():
    with pytest.raises(ValueError, match="Unknown log level"):
        LoggerConfig(level="trace")


def test_config_is_immutable():
    config = LoggerConfig()
    with pytest.raises(AttributeError):
        config.level = "debug"  # type: ignore[misc]


def test_reads_process_environment(clean_env):
    clean_env.setenv("LOG_LEVEL", "error")
    clean_env.setenv("APP_ENV", "production")
    config = config_from_env()
    assert config.level == "error"
    assert config.is_production


def test_loads_dotenv_file(clean_env, tmp_path):
    """.env in the working directory is loaded; variables already set win."""
    (tmp_path / ".env").write_text("LOG_LEVEL=debug\nAPP_ENV=production\n")
    clean_env.setenv("APP_ENV", "development")
    config = config_from_env()
    assert config.level == "debug"
    assert config.environment == "development"
