# infra/db/base.py
from __future__ import annotations
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy import create_engine
import logging
import os

from infra.path import default_db_path

logger = logging.getLogger(__name__)

Base = declarative_base()


def resolve_db_url() -> str:
    override = (os.getenv("TT_DB_URL") or "").strip()
    if override:
        return override
    return f"sqlite:///{default_db_path().as_posix()}"


db_url = resolve_db_url()
logger.info("Using database at: %s", db_url)

engine = create_engine(
    db_url,
    echo=False,
    future=True,
)

SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)


def init_db(bind=None) -> None:
    """Create any missing tables on ``bind`` (the application engine by default)."""
    # Registers the ORM classes on Base.metadata
    import infra.db.models  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)
