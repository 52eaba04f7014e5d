"""Tests for the structlog configurator module."""

import logging
import os
import sys
from unittest.mock import Mock, patch

import pytest
import structlog

from florascan import __version__
from florascan.config import FloraScanConfig
from florascan.config.models import LoggingConfig
from florascan.system.structlog_configurator import (
    _add_static_context,
    _configure_handlers,
    _configure_processors,
    configure_structlog,
    get_deployment_environment,
)


@pytest.fixture
def restore_root_logger():
    """Put the root logger back the way pytest left it."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)
    structlog.reset_defaults()


class TestAddStaticContext:
    """Test the _add_static_context processor."""

    def test_adds_static_fields_to_event_dict(self):
        """Should add static fields to all log events."""
        processor = _add_static_context({"service": "florascan", "version": "1.0.0"})

        result = processor(Mock(spec=structlog.BoundLogger), "info", {"event": "test_event"})

        assert result == {"event": "test_event", "service": "florascan", "version": "1.0.0"}

    def test_overwrites_existing_fields(self):
        """Should overwrite existing fields with static values."""
        processor = _add_static_context({"service": "override"})

        result = processor(Mock(spec=structlog.BoundLogger), "info", {"service": "original"})

        assert result["service"] == "override"


class TestDeploymentEnvironment:
    """Test environment detection."""

    @patch("florascan.system.structlog_configurator.is_docker_environment", return_value=True)
    def test_docker(self, mock_docker):
        """Should report docker when running in a container."""
        assert get_deployment_environment() == "docker"

    @patch("florascan.system.structlog_configurator.is_docker_environment", return_value=False)
    @patch.dict(os.environ, {"FLORASCAN_ENV": "development"})
    def test_development(self, mock_docker):
        """Should report development when FLORASCAN_ENV says so."""
        assert get_deployment_environment() == "development"

    @patch("florascan.system.structlog_configurator.is_docker_environment", return_value=False)
    @patch.dict(os.environ, {}, clear=True)
    def test_unknown(self, mock_docker):
        """Should fall back to unknown."""
        assert get_deployment_environment() == "unknown"


class TestConfigureProcessors:
    """Test processor chain selection."""

    def test_json_renderer_in_docker(self):
        """Should render JSON in production containers when not configured."""
        processors = _configure_processors(FloraScanConfig(), is_docker=True, is_development=False)
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_console_renderer_locally(self):
        """Should render for humans outside containers."""
        processors = _configure_processors(FloraScanConfig(), is_docker=False, is_development=False)
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_explicit_json_setting_wins(self):
        """Should honour json_logs from config."""
        config = FloraScanConfig(logging=LoggingConfig(json_logs=True))
        processors = _configure_processors(config, is_docker=False, is_development=False)
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_caller_info(self):
        """Should add callsite parameters when requested."""
        config = FloraScanConfig(logging=LoggingConfig(include_caller=True))
        processors = _configure_processors(config, is_docker=False, is_development=False)
        assert any(isinstance(p, structlog.processors.CallsiteParameterAdder) for p in processors)

    def test_static_context_includes_version(self):
        """Should stamp service, version and site on every event."""
        processors = _configure_processors(FloraScanConfig(), is_docker=False, is_development=False)
        static = processors[1]

        event = static(Mock(spec=structlog.BoundLogger), "info", {"event": "x"})

        assert event["service"] == "florascan"
        assert event["version"] == __version__
        assert event["site_name"] == "FloraScan"


class TestConfigureHandlers:
    """Test root logger handler setup."""

    def test_single_stdout_handler(self, restore_root_logger):
        """Should replace root handlers with one stdout handler at the configured level."""
        config = FloraScanConfig(logging=LoggingConfig(level="WARNING"))

        _configure_handlers(config)

        root_logger = logging.getLogger()
        assert len(root_logger.handlers) == 1
        assert root_logger.handlers[0].stream is sys.stdout
        assert root_logger.level == logging.WARNING

    def test_configure_structlog(self, restore_root_logger):
        """Should configure structlog without raising."""
        configure_structlog(FloraScanConfig(logging=LoggingConfig(level="DEBUG")))

        assert structlog.is_configured()
        assert logging.getLogger().level == logging.DEBUG
