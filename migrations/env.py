from alembic import context
from sqlalchemy import create_engine, pool
from logging.config import fileConfig
from userdir.core.db import Base  # Подключаем метаданные моделей
from userdir.models.user import User  # noqa: F401  Импортируем все модели
from userdir.models.group import Group  # noqa: F401
from userdir.core.config import DATABASE_URL

# Настраиваем Alembic
config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

# Указываем метаданные моделей
target_metadata = Base.metadata

# URL БД: явно заданный в конфиге Alembic или из настроек приложения
database_url = config.get_main_option("sqlalchemy.url") or DATABASE_URL


def run_migrations_online():
    """Запускаем миграции в онлайн-режиме"""
    connectable = create_engine(database_url, poolclass=pool.NullPool)

    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            compare_type=True,
            render_as_batch=True,
        )

        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    raise NotImplementedError("Offline migrations are not supported.")
else:
    run_migrations_online()
