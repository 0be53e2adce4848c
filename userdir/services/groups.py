from sqlalchemy.orm import Session
from userdir.core.db import fits_db_int
from userdir.core.errors import NotFoundError
from userdir.models.group import Group
from userdir.models.user import User


def list_groups(db: Session) -> list[Group]:
    return db.query(Group).order_by(Group.name).all()


def list_group_users(db: Session, group_id: int) -> list[User]:
    """
    Пользователи группы. Обратная связь вычисляется запросом,
    а не через загруженный граф объектов.
    """
    if not fits_db_int(group_id) or db.get(Group, group_id) is None:
        raise NotFoundError(f"Группа {group_id} не найдена")

    return (
        db.query(User)
        .filter(User.group_id == group_id)
        .order_by(User.last_name, User.first_name, User.id)
        .all()
    )
