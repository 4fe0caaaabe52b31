import logging

import pytest

from locatorgen.config.logging import PACKAGE_LOGGER, setup_logging
from locatorgen.config.settings import Settings, get_settings
from locatorgen.exceptions import ConfigError
from locatorgen.types import Language


@pytest.mark.unit
class TestSettings:
    def test_default_settings(self) -> None:
        settings = Settings()
        assert settings.log_level == "INFO"
        assert settings.json_logs is False
        assert settings.default_language == Language.JAVASCRIPT
        assert settings.tolerant is False

    def test_settings_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOCATORGEN_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("LOCATORGEN_DEFAULT_LANGUAGE", "python")
        monkeypatch.setenv("LOCATORGEN_TOLERANT", "true")
        settings = Settings()
        assert settings.log_level == "DEBUG"
        assert settings.default_language == Language.PYTHON
        assert settings.tolerant is True

    def test_get_settings_is_cached(self) -> None:
        assert get_settings() is get_settings()

    def test_unknown_log_level_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOCATORGEN_LOG_LEVEL", "LOUD")
        with pytest.raises(ConfigError, match="LOUD"):
            get_settings()


@pytest.mark.unit
class TestSetupLogging:
    def test_configures_package_logger(self) -> None:
        setup_logging(log_level="DEBUG", json_output=True)
        package_logger = logging.getLogger(PACKAGE_LOGGER)
        assert package_logger.level == logging.DEBUG
        assert len(package_logger.handlers) == 1
        assert package_logger.propagate is False

    def test_repeated_setup_replaces_handler(self) -> None:
        setup_logging()
        setup_logging(log_level="WARNING")
        package_logger = logging.getLogger(PACKAGE_LOGGER)
        assert len(package_logger.handlers) == 1
        assert package_logger.level == logging.WARNING
