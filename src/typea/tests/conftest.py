# ABOUTME: pytest configuration for typea tests
# ABOUTME: Configures timeouts, markers and shared fixtures

import pytest

from typea.config.logging import configure_for_testing
from typea.config.settings import get_settings


def pytest_configure(config):
    """Configure pytest for typea tests."""
    config.addinivalue_line("markers", "unit: Unit tests with 20-second timeout")
    config.addinivalue_line("markers", "integration: Integration tests with 60-second timeout")
    config.addinivalue_line("markers", "contract: Contract tests with 60-second timeout")
    config.addinivalue_line("markers", "config: Configuration tests")
    configure_for_testing()


def pytest_collection_modifyitems(config, items):
    """Modify test items to add appropriate timeouts based on test type."""
    for item in items:
        # Respect an explicit timeout marker
        if item.get_closest_marker("timeout"):
            continue

        if item.get_closest_marker("unit"):
            item.add_marker(pytest.mark.timeout(20))
        elif any(item.get_closest_marker(mark) for mark in ["integration", "contract"]):
            item.add_marker(pytest.mark.timeout(60))


@pytest.fixture(autouse=True)
def fresh_settings():
    """Drop the cached settings so environment patches take effect."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
