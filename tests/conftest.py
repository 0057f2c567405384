"""
Shared fixtures for Jira Gemini Connect tests.
"""

import os

import pytest

from gemini_connect.llm.provider_config import ProviderConfig
from tests.helpers import TEST_API_KEY, TEST_MODEL


# --- Environment Isolation (Autouse) ---
@pytest.fixture(autouse=True)
def isolate_gemini_env(monkeypatch):
    """Ensure every test starts without GEMINI_*, BASE_URL or DEBUG set."""
    for key in list(os.environ.keys()):
        if key.startswith("GEMINI_"):
            monkeypatch.delenv(key, raising=False)
    for key in ("BASE_URL", "PORT", "PUBLIC_DIR", "DEBUG"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def provider_config():
    return ProviderConfig(api_key=TEST_API_KEY, model_id=TEST_MODEL)
