from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from .config import get_config


def make_engine(url: str):
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    return create_engine(url, connect_args=connect_args, pool_pre_ping=True)


engine = make_engine(get_config().database_url)
SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)

Base = declarative_base()


def init_db(bind=None):
    # models must be imported so their tables are registered on Base
    from . import models  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)


def get_db():
    """One session per request; closed on every exit path."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
