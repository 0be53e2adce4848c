from sqlalchemy.orm import declarative_base, sessionmaker
from userdir.core.config import LITE_DATABASE_URL
from userdir.core.db import make_engine, session_dependency

# Отдельная БД: схема users отличается от основного сервиса
engine = make_engine(LITE_DATABASE_URL)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()

get_db = session_dependency(SessionLocal)


def init_db():
    import userdir.lite.models  # noqa: F401

    Base.metadata.create_all(bind=engine)
