"""Fixtures for infrastructure.logging tests."""

import pytest
from unittest.mock import Mock

from infrastructure.configuration import Settings


@pytest.fixture
def mock_settings():
    """Mock development Settings instance for testing."""
    settings = Mock(spec=Settings)
    settings.PREFIX = "dev"
    settings.LOG_LEVEL = "INFO"
    settings.is_production = False
    return settings
