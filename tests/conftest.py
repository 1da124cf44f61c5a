"""
Materialserv Test Configuration and Fixtures
"""
import tempfile
from pathlib import Path

import pytest
from faker import Faker

from materialserv import View
from materialserv.config import ConfigPresets


@pytest.fixture
def faker():
    """Faker instance for generating test data."""
    return Faker()


@pytest.fixture
def temp_dir():
    """Temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def config():
    """Test configuration."""
    return ConfigPresets.testing()


@pytest.fixture
def view(config):
    """Fresh page rendering context."""
    return View(config)


# Custom markers
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "widgets: Widget rendering tests")
