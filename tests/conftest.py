"""
Shared pytest fixtures and configuration for Form Telemetry tests.

This file provides common test fixtures, mocks, and utilities used across
all test files in the test suite.
"""

import io
import pytest
from unittest.mock import MagicMock

from form_telemetry.core.config import AppConfig
from form_telemetry.models.interaction import InteractionRecord, SessionEntry
from form_telemetry.services.events.event_reducer import EventReducer
from form_telemetry.services.interfaces import SessionStore
from form_telemetry.services.sessions.session_store import InMemorySessionStore


TEST_SESSION_ID = "1234ABCD5678"
TEST_WEBSITE_URL = "http://localhost:8080/index.html"
RECOGNIZED_CONTROLS = ("inputEmail", "inputCVV", "inputCardNumber")


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def test_config():
    """Provide test configuration."""
    return AppConfig(
        environment="test",
        port=8080,
        recognized_form_controls=",".join(RECOGNIZED_CONTROLS),
        diagnostics_enabled=False,
    )


# ============================================================================
# Session Fixtures
# ============================================================================

@pytest.fixture
def session_store():
    """A real in-memory store."""
    return InMemorySessionStore()


@pytest.fixture
def session_entry():
    """An entry with a fixed, recognisable session id."""
    return SessionEntry(InteractionRecord(session_id=TEST_SESSION_ID))


@pytest.fixture
def mock_session_store(session_entry):
    """Mock SessionStore that hands out ``session_entry`` for any id."""
    store = MagicMock(spec=SessionStore)
    store.new_session.return_value = session_entry
    store.find.return_value = session_entry
    store.__len__.return_value = 1
    return store


@pytest.fixture
def empty_session_store():
    """Mock SessionStore that never finds anything."""
    store = MagicMock(spec=SessionStore)
    store.find.return_value = None
    store.__len__.return_value = 0
    return store


# ============================================================================
# Event Fixtures
# ============================================================================

@pytest.fixture
def diagnostics_out():
    """In-memory sink for the diagnostic blocks."""
    return io.StringIO()


@pytest.fixture
def event_reducer(diagnostics_out):
    return EventReducer(RECOGNIZED_CONTROLS, out=diagnostics_out)


@pytest.fixture
def event_payload_factory():
    """Factory for raw JSON event payloads as posted by the form script."""
    def _create_payload(event_type: str, session_id: str = TEST_SESSION_ID, **fields):
        payload = {
            "eventType": event_type,
            "websiteUrl": TEST_WEBSITE_URL,
            "sessionId": session_id,
        }
        payload.update(fields)
        return payload

    return _create_payload


# ============================================================================
# Pytest Configuration
# ============================================================================

def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "integration: mark test as an integration test")
    config.addinivalue_line("markers", "slow: mark test as slow running")
    config.addinivalue_line("markers", "critical: mark test as testing critical functionality")
