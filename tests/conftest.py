"""
Pytest configuration and fixtures.

This file provides pytest-specific configuration and fixtures.
For standard test utilities, see tests/__init__.py
"""

import pytest

from tests import SQLiteTestDatabase


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "db: marks tests as requiring database (deselect with '-m \"not db\"')"
    )
    config.addinivalue_line(
        "markers", "integration: marks end-to-end matching tests"
    )


@pytest.fixture
def sqlite_db():
    """Fresh file-backed SQLite database with all tables created."""
    db = SQLiteTestDatabase()
    yield db
    db.close()
