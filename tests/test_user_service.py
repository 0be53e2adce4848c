import pytest
from sqlalchemy import event
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import sessionmaker
from userdir.core.db import Base, make_engine
from userdir.core.errors import ConflictError, NotFoundError
from userdir.models.group import Group
from userdir.models.user import User
from userdir.schemas.user import UserPayload
from userdir.services import users as user_service


def _payload(**overrides):
    values = {
        "first_name": "Ivan",
        "last_name": "Petrov",
        "email": "ivan@example.com",
        "password": "secret",
        "username": "ivan",
        "group_id": None,
    }
    values.update(overrides)
    return UserPayload(**values)


@pytest.fixture
def fk_session(tmp_path):
    """Сессия на БД с включённой проверкой внешних ключей"""
    engine = make_engine(f"sqlite:///{tmp_path}/fk.db")

    @event.listens_for(engine, "connect")
    def enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    Base.metadata.create_all(bind=engine)
    with sessionmaker(bind=engine, autoflush=False)() as session:
        yield session
    engine.dispose()


def test_create_conflict_from_unique_constraint_rolls_back(db_session, monkeypatch):
    user_service.create_user(db_session, _payload(username="race"))
    monkeypatch.setattr(user_service, "_ensure_username_free", lambda *args, **kwargs: None)

    with pytest.raises(ConflictError):
        user_service.create_user(db_session, _payload(username="race", email="other@example.com"))

    # Сессия пригодна к работе после отката
    assert db_session.query(User).count() == 1
    user_service.create_user(db_session, _payload(username="fresh"))
    assert db_session.query(User).count() == 2


def test_update_conflict_from_unique_constraint(db_session, monkeypatch):
    user_service.create_user(db_session, _payload(username="first"))
    second = user_service.create_user(db_session, _payload(username="second"))
    monkeypatch.setattr(user_service, "_ensure_username_free", lambda *args, **kwargs: None)

    with pytest.raises(ConflictError):
        user_service.update_user(db_session, second.id, _payload(username="first"))

    assert user_service.get_user(db_session, second.id).username == "second"


def test_foreign_key_violation_is_not_reported_as_username_conflict(fk_session):
    with pytest.raises(IntegrityError):
        user_service.create_user(fk_session, _payload(group_id=999))

    assert fk_session.query(User).count() == 0


def test_update_foreign_key_violation_keeps_own_username(fk_session):
    fk_session.add(Group(name="User"))
    fk_session.commit()
    user = user_service.create_user(fk_session, _payload(group_id=1))

    with pytest.raises(IntegrityError):
        user_service.update_user(fk_session, user.id, _payload(group_id=999))

    assert user_service.get_user(fk_session, user.id).group_id == 1


def test_list_users_offset_out_of_storage_range(db_session):
    user_service.create_user(db_session, _payload())
    assert user_service.list_users(db_session, page=10**19, page_size=10) == []


def test_get_user_oversized_id(db_session):
    with pytest.raises(NotFoundError):
        user_service.get_user(db_session, 10**20)
