"""
Migrations for the webinars schema.

`alembic upgrade head --sql` prints the DDL; a plain `alembic upgrade head`
applies it to DATABASE_URL_SYNC.
"""

from logging.config import fileConfig

from alembic import context
from sqlalchemy import engine_from_config, pool

from webinar_api.core.config import get_settings
from webinar_api.db.base import Base
from webinar_api.models import WebinarModel  # noqa: F401 - puts `webinars` on Base.metadata

config = context.config

# psycopg2 URL; the app itself talks asyncpg
config.set_main_option("sqlalchemy.url", get_settings().DATABASE_URL_SYNC)

if config.config_file_name is not None:
    fileConfig(config.config_file_name)


def _emit_sql() -> None:
    """Write the webinar DDL to stdout."""
    context.configure(
        url=config.get_main_option("sqlalchemy.url"),
        target_metadata=Base.metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def _apply() -> None:
    engine = engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )
    with engine.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=Base.metadata,
            compare_type=True,
        )
        with context.begin_transaction():
            context.run_migrations()
    engine.dispose()


if context.is_offline_mode():
    _emit_sql()
else:
    _apply()
