from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from userdir.core.config import DATABASE_URL

# Границы INTEGER в SQLite (знаковое 64-битное целое)
MAX_DB_INT = 2**63 - 1
MIN_DB_INT = -(2**63)


def make_engine(url: str):
    # SQLite-соединение используется из пула потоков FastAPI
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    return create_engine(url, connect_args=connect_args)


def fits_db_int(value: int) -> bool:
    return MIN_DB_INT <= value <= MAX_DB_INT


def session_dependency(session_factory):
    """Зависимость для Depends: сессия на запрос, закрывается после ответа"""
    def get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    return get_db


# Создаём подключение к БД
engine = make_engine(DATABASE_URL)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Базовый класс для моделей
Base = declarative_base()

# Функция для получения сессии БД (используется в Depends)
get_db = session_dependency(SessionLocal)


def init_db():
    """Создаёт таблицы, если их ещё нет"""
    # Модели должны быть зарегистрированы в Base.metadata до create_all
    import userdir.models.group  # noqa: F401
    import userdir.models.user  # noqa: F401

    Base.metadata.create_all(bind=engine)
