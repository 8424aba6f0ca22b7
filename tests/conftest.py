"""Shared fixtures for the holiday service tests."""

import pytest

from holidays_jp_api import create_app
from holidays_jp_api.models.holiday import load_static_table


@pytest.fixture(scope="session")
def static_table():
    return load_static_table()


@pytest.fixture
def client():
    app = create_app()
    app.config["TESTING"] = True
    with app.test_client() as client:
        yield client
