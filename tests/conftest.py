import pytest
from fastapi.testclient import TestClient

from string_analyzer.database import StringStore
from string_analyzer.main import create_app


@pytest.fixture
def store():
    return StringStore()


@pytest.fixture
def client():
    """A client against a fresh app with an empty store"""
    with TestClient(create_app()) as test_client:
        yield test_client
