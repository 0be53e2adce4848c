import logging
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, contains_eager
from userdir.core.db import fits_db_int
from userdir.core.errors import AuthError, ConflictError, NotFoundError, ValidationError
from userdir.core.security import hash_password, verify_password
from userdir.models.user import User
from userdir.schemas.user import UserPayload

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("first_name", "last_name", "email", "password", "username")


def _clean_fields(payload: UserPayload) -> dict:
    """Проверяет обязательные поля и возвращает их без пробелов по краям"""
    values = {}
    for name in REQUIRED_FIELDS:
        value = getattr(payload, name)
        if value is None or not value.strip():
            raise ValidationError("Все поля обязательны для заполнения")
        values[name] = value.strip()
    return values


def _username_taken(db: Session, username: str, exclude_id: int | None = None) -> bool:
    query = db.query(User.id).filter(User.username == username)
    if exclude_id is not None:
        query = query.filter(User.id != exclude_id)
    return query.first() is not None


def _ensure_username_free(db: Session, username: str, exclude_id: int | None = None):
    if _username_taken(db, username, exclude_id):
        raise ConflictError(f"Имя пользователя {username} уже занято")


def _commit(db: Session, username: str, exclude_id: int | None = None):
    # Уникальность имени гарантирует ограничение в БД, предварительная проверка не защищает от гонок
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        # Прочие нарушения ограничений (например, внешний ключ group_id) не относятся к имени
        if not _username_taken(db, username, exclude_id):
            raise
        raise ConflictError(f"Имя пользователя {username} уже занято")


def _apply_fields(user: User, fields: dict, group_id: int | None):
    user.first_name = fields["first_name"]
    user.last_name = fields["last_name"]
    user.email = fields["email"]
    user.username = fields["username"]
    user.password_hash = hash_password(fields["password"])
    user.group_id = group_id


def list_users(db: Session, page: int = 1, page_size: int = 10) -> list[User]:
    """Страница пользователей с названием группы, по фамилии и имени"""
    if page < 1 or page_size < 1:
        raise ValidationError("page и pageSize должны быть положительными")
    offset = (page - 1) * page_size
    if not fits_db_int(offset):
        return []

    return (
        db.query(User)
        .outerjoin(User.group)
        .options(contains_eager(User.group))
        .order_by(User.last_name, User.first_name, User.id)
        .offset(offset)
        .limit(page_size)
        .all()
    )


def get_user(db: Session, user_id: int) -> User:
    user = db.get(User, user_id) if fits_db_int(user_id) else None
    if user is None:
        raise NotFoundError(f"Пользователь {user_id} не найден")
    return user


def create_user(db: Session, payload: UserPayload) -> User:
    fields = _clean_fields(payload)
    _ensure_username_free(db, fields["username"])

    user = User()
    _apply_fields(user, fields, payload.group_id)
    db.add(user)
    _commit(db, fields["username"])
    db.refresh(user)

    logger.info(f"✅ Создан пользователь {user.username} (id={user.id})")
    return user


def update_user(db: Session, user_id: int, payload: UserPayload) -> User:
    """Полная замена полей пользователя (PUT)"""
    user = get_user(db, user_id)
    fields = _clean_fields(payload)
    _ensure_username_free(db, fields["username"], exclude_id=user.id)

    _apply_fields(user, fields, payload.group_id)
    _commit(db, fields["username"], exclude_id=user_id)
    db.refresh(user)

    logger.info(f"✏️ Обновлён пользователь {user.username} (id={user.id})")
    return user


def delete_user(db: Session, user_id: int) -> None:
    user = get_user(db, user_id)
    db.delete(user)
    db.commit()
    logger.info(f"❌ Удалён пользователь {user_id}")


def is_username_available(db: Session, username: str | None) -> bool:
    """True, если имя пользователя свободно"""
    if username is None or not username.strip():
        raise ValidationError("Имя пользователя обязательно")

    exists = db.query(User.id).filter(User.username == username.strip()).first() is not None
    return not exists


def authenticate(db: Session, username: str | None, password: str | None) -> User:
    """Точное (с учётом регистра) совпадение имени и пароля"""
    user = None
    if username and password:
        user = db.query(User).filter(User.username == username).first()

    if user is None or not verify_password(password, user.password_hash):
        logger.warning(f"🔒 Неудачная попытка входа для {username!r}")
        raise AuthError("Неверное имя пользователя или пароль")

    return user
