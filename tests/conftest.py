import pytest
from fastapi.testclient import TestClient

from students_api.app.core.config import Settings
from students_api.app.core.db import get_database_path, init_db
from students_api.app.main import create_app
from students_api.app.services.student_service import StudentService


@pytest.fixture
def settings(tmp_path):
    return Settings(storage_path=str(tmp_path / "storage" / "students.db"), env="test")


@pytest.fixture
def service(settings):
    db_path = get_database_path(settings)
    init_db(db_path)
    return StudentService(db_path)


@pytest.fixture
def client(settings):
    app = create_app(settings)
    with TestClient(app) as test_client:
        yield test_client
