"""
Pytest configuration and fixtures.

This file provides pytest-specific configuration and fixtures.
For standard test utilities, see tests/__init__.py
"""

import pytest

from tests import get_test_db_url, make_test_config


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "db: marks tests as requiring database (deselect with '-m \"not db\"')"
    )


@pytest.fixture
def app_context():
    """
    Fully wired AppContext on a fresh test database.

    Tables are created up front and dropped afterwards, so every test starts
    from an empty schema.
    """
    from core.app_context import AppContext
    from database.models import Base

    context = AppContext.build(make_test_config(get_test_db_url()))
    context.database.create_all()
    yield context
    Base.metadata.drop_all(context.database.engine)
    context.close()


@pytest.fixture
def database(app_context):
    return app_context.database


@pytest.fixture
def db_session(database):
    """Session that is rolled back after the test."""
    session = database.SessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture
def repo(db_session):
    from database.repository import HrRepository
    return HrRepository(db_session)


@pytest.fixture
def client(app_context):
    """TestClient around an app bound to the test database."""
    from fastapi.testclient import TestClient
    from web.backend.app import create_app

    with TestClient(create_app(context=app_context)) as test_client:
        yield test_client
