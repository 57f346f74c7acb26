"""Shared pytest fixtures for mite tools tests."""

import json
from pathlib import Path

import pytest

from mite_tools.api.client import MiteClient
from mite_tools.config import Config

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def load_fixture(name: str):
    """Load a JSON fixture file."""
    return json.loads((FIXTURES_DIR / name).read_text())


@pytest.fixture
def mock_config():
    """Create mock application config."""
    return Config(account="acme", api_key="test_api_key")


@pytest.fixture
def client(mock_config):
    """MiteClient pointed at the mocked acme account."""
    with MiteClient(mock_config.account, mock_config.api_key) as mite:
        yield mite


@pytest.fixture
def account_response():
    return load_fixture("account.json")


@pytest.fixture
def myself_response():
    return load_fixture("myself.json")


@pytest.fixture
def time_entries_response():
    """Three wrapped time entries with ids 1, 2 and 3."""
    return load_fixture("time_entries.json")


@pytest.fixture
def customers_response():
    return load_fixture("customers.json")


@pytest.fixture
def project_response():
    return load_fixture("project.json")


@pytest.fixture
def services_response():
    return load_fixture("services.json")


@pytest.fixture
def users_response():
    return load_fixture("users.json")
