import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from backend.api import app as api_app
from frontend.app import app as frontend_app
from frontend.client import PeopleClient


@pytest.fixture
def api_client():
    return TestClient(api_app)


@pytest.fixture
def people_client(api_client):
    """PeopleClient talking to the API in-process."""
    return PeopleClient(base_url=str(api_client.base_url), session=api_client)


@pytest.fixture
def frontend_client(people_client):
    original = frontend_app.config["PEOPLE_CLIENT"]
    frontend_app.config["PEOPLE_CLIENT"] = people_client
    frontend_app.config["TESTING"] = True

    yield frontend_app.test_client()

    frontend_app.config["PEOPLE_CLIENT"] = original
