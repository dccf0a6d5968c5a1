"""
Pytest configuration and fixtures for the sales tax resolver tests.
"""

import json
import logging
import os
import sys
from datetime import datetime, timezone
from pathlib import Path
from unittest.mock import patch

import pytest

# Add src to Python path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))


@pytest.fixture
def mock_env():
    """Mock environment variables for testing."""
    with patch.dict(os.environ, {
        'LOG_LEVEL': 'DEBUG',
        'SALESTAX_ORIGIN_COUNTRY': 'de',
        'SALESTAX_REGIONAL_TAX_ENABLED': 'false',
    }):
        yield


@pytest.fixture
def fixed_clock():
    """Build a clock frozen at the given UTC instant."""
    def _clock(*args):
        instant = datetime(*args, tzinfo=timezone.utc)
        return lambda: instant
    return _clock


@pytest.fixture
def sample_rates():
    """Small rate table with history and per-state rates."""
    return json.dumps({
        'AA': {'type': 'vat', 'rate': 0.2},
        'BB': {
            'type': 'vat',
            'rate': 0.25,
            'before': {'2021-01-01T00:00:00.000Z': {'type': 'vat', 'rate': 0.21}},
        },
        'CC': {
            'type': 'gst',
            'rate': 0.05,
            'states': {
                'XX': {'type': 'pst', 'rate': 0.07},
                'ZZ': {'type': 'none', 'rate': 0},
            },
        },
        'DD': {
            'type': 'none',
            'rate': 0,
            'states': {'YY': {'type': 'sales', 'rate': 0.06}},
        },
    })


@pytest.fixture
def sample_regions():
    """Region table where AA and BB share a region."""
    return json.dumps({
        'R1': ['AA', 'BB'],
        'R2': ['CC'],
    })


@pytest.fixture
def package_logger():
    """Restore the package logger after tests that configure it."""
    logger = logging.getLogger('salestax')
    level = logger.level
    yield logger
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.setLevel(level)
