"""Shared pytest fixtures for the Employee Management API tests.

Every test gets its own SQLite file in a temporary directory and an
application built for that file, so tests never touch the default
database.
"""

import pytest
from fastapi.testclient import TestClient

from employee_api.app.core.config import Settings
from employee_api.app.core.db import init_db
from employee_api.app.main import create_app
from employee_api.app.models.employee import Employee
from employee_api.app.repositories.employee_repository import EmployeeRepository


@pytest.fixture
def db_path(tmp_path):
    """Path of an initialised, empty database file."""
    return init_db(str(tmp_path / "test.db"))


@pytest.fixture
def repository(db_path):
    """Repository bound to the temporary database, emptied before each test."""
    repo = EmployeeRepository(db_path)
    repo.delete_all()
    return repo


@pytest.fixture
def app(db_path):
    return create_app(Settings(database_url=db_path, log_level="WARNING"))


@pytest.fixture
def client(app, repository):
    """FastAPI test client running the app's startup hooks.

    Yields:
        TestClient bound to an app using the same database as
        ``repository``.
    """
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def john():
    return Employee(first_name="john", last_name="doe", email="johndoe@gmail.com")


@pytest.fixture
def steve():
    return Employee(first_name="steve", last_name="jobs", email="stevejobs@gmail.com")
