import os
import tempfile

# БД для тестов задаётся до импорта приложения (config читает окружение при импорте)
_tmp_dir = tempfile.mkdtemp(prefix="userdir-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{_tmp_dir}/users.db"
os.environ["LITE_DATABASE_URL"] = f"sqlite:///{_tmp_dir}/users_lite.db"

import pytest
from fastapi.testclient import TestClient


@pytest.fixture
def client():
    """Клиент основного сервиса на пустой БД; lifespan создаёт таблицы и seed-данные"""
    from main import app
    from userdir.core.db import Base, engine

    Base.metadata.drop_all(bind=engine)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def db_session():
    """Сессия на пустой схеме без seed-данных"""
    from userdir.core.db import Base, SessionLocal, engine, init_db

    init_db()
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    with SessionLocal() as session:
        yield session


@pytest.fixture
def lite_client():
    from main_lite import app
    from userdir.lite.db import Base, engine

    Base.metadata.drop_all(bind=engine)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def user_payload():
    def make(**overrides):
        payload = {
            "firstName": "Ivan",
            "lastName": "Petrov",
            "email": "ivan@example.com",
            "password": "secret",
            "username": "ivan",
            "groupId": 2,
        }
        payload.update(overrides)
        return payload

    return make


@pytest.fixture
def create_user(client, user_payload):
    def create(**overrides):
        response = client.post("/api/users", json=user_payload(**overrides))
        assert response.status_code == 201, response.text
        return response.json()

    return create
