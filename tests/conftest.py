"""Shared test fixtures for client-parser tests."""

import pytest
from fastapi.testclient import TestClient

from client_parser.classifier import KNOWN_USER_AGENTS


@pytest.fixture(autouse=True)
def clear_classification_cache():
    KNOWN_USER_AGENTS.clear()
    yield
    KNOWN_USER_AGENTS.clear()


@pytest.fixture
def client():
    from client_parser.main import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def sample_user_agents():
    return {
        "android_phone": "Mozilla/5.0 (Linux; Android 10; SM-G973F) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/100.0.4896.127 Mobile Safari/537.36",
        "iphone": "Mozilla/5.0 (iPhone; CPU iPhone OS 17_0_3 like Mac OS X) AppleWebKit/605.1.15 (KHTML, like Gecko) Version/17.0.3 Mobile/15E148 Safari/604.1",
        "windows_chrome": "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/100.0.4896.127 Safari/537.36",
        "mac_safari": "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/605.1.15 (KHTML, like Gecko) Version/15.1 Safari/605.1.15",
    }
