"""Pytest configuration and fixtures."""
import os
import sys
from unittest.mock import patch

import pytest

# Add project root to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from app import create_app  # noqa: E402
from lock_config import Settings  # noqa: E402


@pytest.fixture
def settings():
    return Settings(
        verify_token="verify-me",
        access_token="page-token",
        locked_name="Locked Group",
    )


@pytest.fixture
def client(settings):
    app = create_app(settings)
    app.config["TESTING"] = True
    return app.test_client()


@pytest.fixture
def mock_post():
    """Patch the outbound Graph API call."""
    with patch("graph_client.requests.post") as post:
        post.return_value.json.return_value = {"success": True}
        yield post
