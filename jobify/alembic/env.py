"""
Alembic migration environment for the jobs schema.
The database URL always comes from jobify settings (DATABASE_URL), never from alembic.ini.
"""
import sys
from pathlib import Path

# repo root, so "jobify" imports when alembic runs from elsewhere
sys.path.insert(0, str(Path(__file__).resolve().parent.parent.parent))

from logging.config import fileConfig

from sqlalchemy import create_engine, pool
from alembic import context

from jobify.app.core.config import settings
from jobify.app.db.base import Base
import jobify.app.models  # noqa: F401

config = context.config
config.set_main_option("sqlalchemy.url", settings.database_url)

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata

# SQLite (the default database) cannot ALTER columns in place; batch mode
# makes autogenerated revisions recreate the jobs table instead.
_is_sqlite = settings.database_url.startswith("sqlite")


def _configure_kwargs() -> dict:
    return {
        "target_metadata": target_metadata,
        "compare_type": True,
        "render_as_batch": _is_sqlite,
    }


def run_migrations_offline() -> None:
    context.configure(
        url=settings.database_url,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        **_configure_kwargs(),
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    connectable = create_engine(settings.database_url, poolclass=pool.NullPool)
    with connectable.connect() as connection:
        context.configure(connection=connection, **_configure_kwargs())
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
