from pathlib import Path

import pytest

from task_app import create_app
from taskapi.store import TaskStore


@pytest.fixture()
def log_path(tmp_path: Path) -> Path:
    return tmp_path / "logs" / "api.log"


@pytest.fixture()
def app(log_path: Path):
    app = create_app({
        "TESTING": True,
        "AUDIT_LOG_PATH": str(log_path),
        "SEED_EXAMPLE_TASKS": False,
        "DEVELOPMENT": False,
    })
    yield app


@pytest.fixture()
def client(app):
    with app.test_client() as c:
        yield c


@pytest.fixture()
def store(app):
    with app.app_context():
        yield TaskStore()


@pytest.fixture()
def sample_task():
    return {"titulo": "Escribir tests", "descripcion": "Cubrir la API"}
