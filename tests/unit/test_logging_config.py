"""Tests for logging configuration."""

import logging

import pytest

from external_auth.config.logging_config import (
    FORMAT_STRINGS,
    LogFormat,
    LoggingConfig,
    get_log_level_from_verbosity,
    get_logger,
)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove logging variables from the environment."""
    for name in ("LOG_LEVEL", "LOG_VERBOSITY", "LOG_FORMAT", "ENABLE_AUTH_LOGGING"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestLoggingConfig:
    """Test cases for LoggingConfig."""
    
    @pytest.mark.parametrize("verbosity, level", [
        ("quiet", "ERROR"),
        ("NORMAL", "WARNING"),
        ("verbose", "INFO"),
        ("DEBUG", "DEBUG"),
        ("chatty", "WARNING"),
    ])
    def test_verbosity_mapping(self, verbosity, level):
        """Test verbosity modes map to log levels."""
        assert get_log_level_from_verbosity(verbosity) == level
    
    def test_defaults(self, clean_env):
        """Test warning level and simple format by default."""
        config = LoggingConfig.build()
        
        assert config["root"]["level"] == "WARNING"
        assert config["formatters"]["default"]["format"] == FORMAT_STRINGS[LogFormat.SIMPLE]
        assert "external_auth.application" not in config["loggers"]
    
    def test_explicit_level_overrides_verbosity(self, clean_env):
        """Test LOG_LEVEL wins over LOG_VERBOSITY."""
        clean_env.setenv("LOG_LEVEL", "debug")
        clean_env.setenv("LOG_VERBOSITY", "QUIET")
        
        assert LoggingConfig.build()["root"]["level"] == "DEBUG"
    
    def test_json_format(self, clean_env):
        """Test LOG_FORMAT selects the formatter."""
        clean_env.setenv("LOG_FORMAT", "json")
        
        assert LoggingConfig.build()["formatters"]["default"]["format"] == FORMAT_STRINGS[LogFormat.JSON]
    
    def test_unknown_format_falls_back(self, clean_env):
        """Test an unknown format uses the simple one."""
        clean_env.setenv("LOG_FORMAT", "xml")
        
        assert LoggingConfig.build()["formatters"]["default"]["format"] == FORMAT_STRINGS[LogFormat.SIMPLE]
    
    def test_auth_logging(self, clean_env):
        """Test ENABLE_AUTH_LOGGING raises authentication loggers to INFO."""
        clean_env.setenv("ENABLE_AUTH_LOGGING", "true")
        
        assert LoggingConfig.build()["loggers"]["external_auth.application"] == {"level": "INFO"}
    
    def test_configure_applies_level(self, clean_env):
        """Test configure applies the root level."""
        root = logging.getLogger()
        previous_level, previous_handlers = root.level, list(root.handlers)
        clean_env.setenv("LOG_LEVEL", "ERROR")
        try:
            LoggingConfig.configure()
            assert root.level == logging.ERROR
        finally:
            root.handlers = previous_handlers
            root.setLevel(previous_level)
    
    def test_get_logger(self):
        """Test get_logger returns the named logger."""
        assert get_logger("external_auth.test").name == "external_auth.test"
