"""Pytest configuration and shared fixtures."""

import pytest
import structlog

from poslink_demo.config.parameters import ParameterStore
from poslink_demo.sdk.models import InitResult
from poslink_demo.sdk.simulator import SimulatedConnector


@pytest.fixture(autouse=True, scope="session")
def _quiet_logging():
    """Route structlog events nowhere so CLI output stays clean."""
    structlog.configure(logger_factory=structlog.ReturnLoggerFactory())
    yield
    structlog.reset_defaults()


@pytest.fixture
def store():
    """Provide a parameter store holding the default connection parameters."""
    return ParameterStore()


@pytest.fixture
def identity():
    """Provide a successful Init response with known identity fields."""
    return InitResult(
        success=True,
        app_name="PosApp",
        app_version="2.01",
        serial_number="SN123",
        model_name="A35",
        os_version="Android 10",
    )


@pytest.fixture
def connector(identity):
    """Provide a simulated connector answering with ``identity``."""
    return SimulatedConnector(identity=identity)
