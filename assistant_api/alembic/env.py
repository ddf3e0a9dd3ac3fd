"""
Alembic migration environment.
Reads the database URL from Settings and targets the app's models for autogenerate.
"""
import sys
from pathlib import Path

# Project root (parent of assistant_api/) must be importable
sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from logging.config import fileConfig

from alembic import context
from sqlalchemy import create_engine, pool

from assistant_api.app.core.config import settings
from assistant_api.app.db.base import Base

# Import all models so they register with Base.metadata
import assistant_api.app.models  # noqa: F401

config = context.config
config.set_main_option("sqlalchemy.url", settings.database_url)

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata

# SQLite cannot ALTER most constraints in place; batch mode recreates tables
_BATCH = settings.database_url.startswith("sqlite")


def run_migrations_offline() -> None:
    """Emit SQL without a live connection."""
    context.configure(
        url=settings.database_url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        render_as_batch=_BATCH,
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Run against the configured database."""
    connectable = create_engine(settings.database_url, poolclass=pool.NullPool)

    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            compare_type=True,
            render_as_batch=_BATCH,
        )

        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
