"""
Integration test fixtures for the Form Telemetry HTTP layer.

Apps are built with ``create_app`` around a mock or real session store so
each test owns its state.
"""
import io

import pytest
from fastapi.testclient import TestClient

from form_telemetry.main import create_app


@pytest.fixture
def app_factory(test_config):
    """Build an app around the given store, capturing diagnostics in memory."""
    def _create_app(session_store, diagnostics_out=None):
        return create_app(
            test_config,
            session_store=session_store,
            diagnostics_out=diagnostics_out if diagnostics_out is not None else io.StringIO(),
        )

    return _create_app


@pytest.fixture
def client(app_factory, mock_session_store):
    """Client over an app whose store always finds the test session."""
    with TestClient(app_factory(mock_session_store)) as test_client:
        yield test_client


@pytest.fixture
def empty_client(app_factory, empty_session_store):
    """Client over an app whose store never finds a session."""
    with TestClient(app_factory(empty_session_store)) as test_client:
        yield test_client
