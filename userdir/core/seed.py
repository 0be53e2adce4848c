import logging
from sqlalchemy.orm import Session
from userdir.core.config import (
    ADMIN_EMAIL,
    ADMIN_GROUP_NAME,
    ADMIN_PASSWORD,
    ADMIN_USERNAME,
    USER_GROUP_NAME,
)
from userdir.core.security import hash_password
from userdir.models.group import Group
from userdir.models.user import User

logger = logging.getLogger(__name__)


def seed_groups(db: Session):
    if db.query(Group).first() is not None:
        return

    db.add_all([Group(name=ADMIN_GROUP_NAME), Group(name=USER_GROUP_NAME)])
    db.commit()
    logger.info(f"🌱 Созданы группы {ADMIN_GROUP_NAME} и {USER_GROUP_NAME}")


def seed_admin(db: Session):
    has_admin = (
        db.query(User.id)
        .join(User.group)
        .filter(Group.name == ADMIN_GROUP_NAME)
        .first()
    )
    if has_admin is not None:
        return

    # Группа Admin должна существовать к этому моменту (seed_groups вызывается раньше)
    admin_group = db.query(Group).filter(Group.name == ADMIN_GROUP_NAME).order_by(Group.id).first()
    if admin_group is None:
        logger.warning(f"⚠️ Группа {ADMIN_GROUP_NAME} не найдена, администратор не создан")
        return

    if db.query(User.id).filter(User.username == ADMIN_USERNAME).first() is not None:
        logger.warning(f"⚠️ Имя {ADMIN_USERNAME} занято пользователем вне группы {ADMIN_GROUP_NAME}")
        return

    db.add(User(
        username=ADMIN_USERNAME,
        first_name="Admin",
        last_name="User",
        email=ADMIN_EMAIL,
        password_hash=hash_password(ADMIN_PASSWORD),
        group_id=admin_group.id,
    ))
    db.commit()
    logger.info(f"🌱 Создан администратор по умолчанию {ADMIN_USERNAME}")


def seed(db: Session):
    """Идемпотентное заполнение базовыми данными: сначала группы, потом администратор"""
    seed_groups(db)
    seed_admin(db)
