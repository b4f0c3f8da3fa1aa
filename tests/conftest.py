"""Pytest configuration for async testing.

This configuration ensures:
1. Async tests run under pytest-asyncio (asyncio_mode = "auto" in pyproject.toml)
2. Container singletons are rebuilt for tests that use them
3. Shared fixtures for loggers and event buses
"""

from unittest.mock import MagicMock

import pytest

from promo_events.core.enums import DispatchMode
from promo_events.infrastructure.events.in_memory_event_bus import InMemoryEventBus


@pytest.fixture
def mock_logger():
    """Create mock LoggerProtocol."""
    logger = MagicMock()
    logger.debug = MagicMock()
    logger.info = MagicMock()
    logger.warning = MagicMock()
    logger.error = MagicMock()
    return logger


@pytest.fixture
def event_bus(mock_logger):
    """Fresh sequential InMemoryEventBus with a mocked logger."""
    return InMemoryEventBus(logger=mock_logger)


@pytest.fixture
def concurrent_event_bus(mock_logger):
    """Fresh InMemoryEventBus in CONCURRENT dispatch mode."""
    return InMemoryEventBus(logger=mock_logger, dispatch_mode=DispatchMode.CONCURRENT)


@pytest.fixture
def fresh_container():
    """Clear container singletons before and after the test.

    Yields:
        None. Tests call container factories directly.
    """
    from promo_events.core import container
    from promo_events.core.config import get_settings

    factories = (
        get_settings,
        container.get_logger,
        container.get_event_bus,
        container.get_logging_event_handler,
        container.get_notification_event_handler,
        container.get_analytics_event_handler,
    )
    for factory in factories:
        factory.cache_clear()
    yield
    for factory in factories:
        factory.cache_clear()


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Container wiring and end-to-end publish flows"
    )
