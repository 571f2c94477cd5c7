"""Root-level pytest configuration and shared fixtures."""

import logging

import numpy as np
import pytest
import structlog

from monty_hall.simulation.core.game_state import Arrangement, Label


def pytest_configure(config):
    """Register custom markers and configure test environment."""
    config.addinivalue_line("markers", "slow: mark test as slow running")
    config.addinivalue_line("markers", "unit: mark test as unit test")
    config.addinivalue_line("markers", "cli: mark test as CLI test")

    _configure_test_logging()


def _configure_test_logging() -> None:
    """Configure structlog so log calls return instead of writing to captured streams."""
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.BoundLogger,
        logger_factory=structlog.ReturnLoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=False,  # Disable caching in tests
    )


@pytest.fixture
def rng() -> np.random.RandomState:
    """Seeded random source."""
    return np.random.RandomState(42)


@pytest.fixture
def prize_last() -> Arrangement:
    """Arrangement with the car behind door 3."""
    return Arrangement((Label.DECOY, Label.DECOY, Label.PRIZE))


@pytest.fixture
def prize_first() -> Arrangement:
    """Arrangement with the car behind door 1."""
    return Arrangement((Label.PRIZE, Label.DECOY, Label.DECOY))


@pytest.fixture
def all_arrangements() -> list[Arrangement]:
    """The three distinct arrangements."""
    arrangements = []
    for prize_door in (1, 2, 3):
        labels = [Label.DECOY] * 3
        labels[prize_door - 1] = Label.PRIZE
        arrangements.append(Arrangement(tuple(labels)))
    return arrangements


@pytest.fixture
def restore_logging():
    """Put the test logging configuration back after a test reconfigures it."""
    root_handlers = logging.getLogger().handlers[:]
    root_level = logging.getLogger().level
    config = structlog.get_config()
    yield
    structlog.configure(**config)
    root = logging.getLogger()
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()
    for handler in root_handlers:
        root.addHandler(handler)
    root.setLevel(root_level)
