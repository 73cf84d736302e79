"""
Shared fixtures: an in-memory students collection (mongomock) wired into
the app through FastAPI dependency overrides.
"""
import mongomock
import pytest
from fastapi.testclient import TestClient

from app.core.config import get_settings
from app.db import mongodb
from app.main import app
from app.services.student_service import StudentService, get_student_service


@pytest.fixture(autouse=True)
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def no_open_connection(monkeypatch):
    monkeypatch.setattr(mongodb, "_client", None)
    monkeypatch.setattr(mongodb, "_db", None)


@pytest.fixture
def students_collection():
    return mongomock.MongoClient().school.students


@pytest.fixture
def client(students_collection):
    app.dependency_overrides[get_student_service] = lambda: StudentService(students_collection)
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()
