"""
Root pytest configuration and fixtures for fbgraph.

Provides common fixtures and test utilities for the test suite.
"""

import os
from pathlib import Path
import sys

import pytest
import requests

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


@pytest.fixture
def access_token():
    """Test access token."""
    return "EAAB-test-token"


@pytest.fixture
def base_url():
    """Test base URL."""
    return "https://graph.test.facebook.com"


@pytest.fixture(autouse=True)
def clean_environment():
    """Clean environment variables before each test."""
    original_env = os.environ.copy()

    # Remove Facebook environment variables
    for key in list(os.environ.keys()):
        if key.startswith("FACEBOOK_"):
            del os.environ[key]

    yield

    # Restore original environment
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture(autouse=True)
def sleep_calls(monkeypatch):
    """Skip backoff delays between retries, recording the requested delays."""
    calls = []
    monkeypatch.setattr("fbgraph._http.time.sleep", calls.append)
    return calls


@pytest.fixture
def make_response():
    """Build a detached requests.Response with the given status and body."""

    def _make(status_code: int, body: str = "", url: str = "https://graph.test/me"):
        resp = requests.Response()
        resp.status_code = status_code
        resp.reason = "OK" if status_code < 400 else "Error"
        resp.url = url
        resp.encoding = "utf-8"
        resp._content = body.encode("utf-8")
        return resp

    return _make
