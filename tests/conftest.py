"""
Pytest configuration and fixtures.

This file provides pytest-specific configuration and fixtures.
For standard test utilities, see tests/__init__.py
"""

import os
import pytest


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "db: marks tests as requiring database (deselect with '-m \"not db\"')"
    )


@pytest.fixture(scope="session")
def test_database():
    """
    Session-scoped fixture that automatically manages the test database container.

    Uses testcontainers to start a PostgreSQL container before tests and stops
    it after all tests complete. Falls back to external database if
    TEST_DATABASE_URL is set.
    """
    # If TEST_DATABASE_URL is set, use external database
    external_url = os.environ.get("TEST_DATABASE_URL")
    if external_url:
        from tests import check_db_available
        if check_db_available():
            from sqlalchemy import create_engine
            from database.models import Base
            Base.metadata.create_all(create_engine(external_url))
            yield external_url
            return
        else:
            pytest.skip("External database not available")

    # Try to use testcontainers for automatic container management
    try:
        from testcontainers.postgres import PostgresContainer

        postgres = PostgresContainer(
            image="postgres:16-alpine",
            username="testuser",
            password="testpass",
            dbname="crbi_matcher_test",
            port=5432
        )
        postgres.start()
    except Exception as e:
        pytest.skip(f"Could not start test database container: {e}")

    try:
        db_url = postgres.get_connection_url()

        from sqlalchemy import create_engine
        from database.models import Base
        engine = create_engine(db_url)
        Base.metadata.create_all(engine)
        engine.dispose()

        print(f"\n✓ Test database started: {db_url}")

        yield db_url
    finally:
        postgres.stop()
        print("\n✓ Test database stopped")
