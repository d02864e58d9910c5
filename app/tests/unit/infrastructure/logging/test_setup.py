"""Unit tests for infrastructure.logging.setup module.

Tests cover:
- configure_logging function
- get_module_logger function
- Test logging suppression in test environment
"""

import importlib
import logging

import pytest
import structlog

from infrastructure.logging.setup import (
    bind_language_context,
    configure_logging,
    get_module_logger,
    _is_test_environment,
)


@pytest.mark.unit
class TestIsTestEnvironment:
    """Test suite for _is_test_environment helper."""

    def test_detects_pytest_in_sys_modules(self):
        """Returns True when pytest is in sys.modules."""
        assert _is_test_environment() is True


@pytest.mark.unit
class TestConfigureLogging:
    """Test suite for configure_logging function."""

    def test_configure_logging_returns_bound_logger(self, mock_settings):
        """configure_logging returns a logger with the standard methods."""
        result = configure_logging(settings=mock_settings)

        assert result is not None
        assert hasattr(result, "info")
        assert hasattr(result, "debug")
        assert hasattr(result, "warning")
        assert hasattr(result, "error")

    def test_configure_logging_with_overrides(self, mock_settings):
        """configure_logging accepts log_level and is_production overrides."""
        assert configure_logging(settings=mock_settings, log_level="DEBUG") is not None
        assert configure_logging(settings=mock_settings, is_production=True) is not None

    def test_configure_logging_without_settings(self):
        """configure_logging works without explicit settings."""
        assert configure_logging() is not None

    def test_configure_logging_idempotent(self, mock_settings):
        """Multiple configure_logging calls are safe."""
        assert configure_logging(settings=mock_settings) is not None
        assert configure_logging(settings=mock_settings) is not None

    def test_configure_logging_suppresses_in_test_env(self, mock_settings):
        """In test environment, root logger level is set high to suppress output."""
        configure_logging(settings=mock_settings)

        assert logging.getLogger().level >= logging.CRITICAL


@pytest.mark.unit
class TestGetLoggers:
    """Test suite for get_module_logger."""

    def test_get_module_logger(self):
        """get_module_logger returns a functional logger."""
        logger = get_module_logger()

        assert hasattr(logger, "info")
        assert hasattr(logger, "bind")

    @pytest.mark.parametrize(
        "module_path",
        [
            "infrastructure.i18n.loader",
            "infrastructure.i18n.factory",
            "infrastructure.i18n.resolvers",
            "infrastructure.i18n.translator",
        ],
    )
    def test_module_loggers_carry_module_context(self, module_path):
        """i18n modules log with their component and module_path bound."""
        module = importlib.import_module(module_path)
        context = structlog.get_context(module.logger)

        assert context["component"] == module_path.rsplit(".", 1)[-1]
        assert context["module_path"] == module_path

    def test_logging_methods_dont_raise(self, mock_settings):
        """Logging methods execute without raising exceptions."""
        configure_logging(settings=mock_settings)

        log = structlog.get_logger().bind(component="test")

        # None of these should raise (output is suppressed in tests)
        log.debug("translation_lookup", key="nav.home")
        log.info("loaded_translations", language="nb")
        log.warning("translation_not_found", key="missing.key")
        log.error("translation_parse_error", file="en.json")


@pytest.mark.unit
class TestBindLanguageContext:
    """Test suite for bind_language_context."""

    def test_binds_language_inside_block(self):
        """The language is in the contextvars only inside the block."""
        with bind_language_context("nb", path="/nb/about"):
            context = structlog.contextvars.get_contextvars()
            assert context["language"] == "nb"
            assert context["path"] == "/nb/about"

        assert "language" not in structlog.contextvars.get_contextvars()

    def test_restores_outer_context(self):
        """Nested blocks restore the outer language on exit."""
        with bind_language_context("en"):
            with bind_language_context("nl"):
                assert structlog.contextvars.get_contextvars()["language"] == "nl"
            assert structlog.contextvars.get_contextvars()["language"] == "en"
