import logging

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

logger = logging.getLogger(__name__)

Base = declarative_base()


def make_engine(url: str) -> Engine:
    # SQLite connections are shared across the framework's worker threads
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    return create_engine(url, connect_args=connect_args)


def make_session_factory(bind: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=bind)


def init_db(bind: Engine) -> None:
    """Create the tables if they don't exist."""
    import models  # noqa: F401  registers the mapped classes on Base

    Base.metadata.create_all(bind=bind)
    logger.info("Database tables created or already exist (%s).", bind.url)
