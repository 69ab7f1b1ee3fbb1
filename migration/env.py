from alembic import context
from sqlalchemy import create_engine, pool

from infra.db.base import Base, resolve_db_url
import infra.db.models  # noqa: F401

config = context.config
target_metadata = Base.metadata


def _db_url() -> str:
    # infra.migrate sets the URL; a bare `alembic upgrade` falls back to TT_DB_URL / the data dir
    return (config.get_main_option("sqlalchemy.url") or "").strip() or resolve_db_url()


def _configure_kwargs(url: str) -> dict:
    return {
        "target_metadata": target_metadata,
        # SQLite cannot ALTER most columns in place
        "render_as_batch": url.startswith("sqlite"),
        "compare_type": True,
    }


def run_migrations_offline() -> None:
    url = _db_url()
    context.configure(
        url=url,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        **_configure_kwargs(url),
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    url = _db_url()
    engine = create_engine(url, future=True, poolclass=pool.NullPool)
    try:
        with engine.connect() as connection:
            context.configure(connection=connection, **_configure_kwargs(url))
            with context.begin_transaction():
                context.run_migrations()
    finally:
        engine.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
