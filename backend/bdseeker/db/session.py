import importlib.util
import logging

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)


def normalize_database_url(url: str) -> str:
    """Point plain postgres URLs at psycopg v3 when psycopg2 is not installed.

    The legacy ``postgres://`` prefix is rewritten to ``postgresql://`` as well.
    """
    try:
        psycopg2_present = importlib.util.find_spec("psycopg2") is not None
    except (ImportError, ValueError):
        psycopg2_present = False

    if url.startswith("postgres://"):
        url = "postgresql://" + url[len("postgres://"):]
    if not psycopg2_present and url.startswith("postgresql://"):
        url = url.replace("postgresql://", "postgresql+psycopg://", 1)
    return url


def build_engine(database_url: str) -> Engine:
    if not database_url:
        raise RuntimeError("DATABASE_URL environment variable must be set")
    url = normalize_database_url(database_url)
    if url.startswith("sqlite"):
        # One shared connection so an in-memory database survives across sessions.
        kwargs = {"connect_args": {"check_same_thread": False}}
        if ":memory:" in url or url in ("sqlite://", "sqlite+pysqlite://"):
            kwargs["poolclass"] = StaticPool
        return create_engine(url, **kwargs)
    return create_engine(url, pool_pre_ping=True, pool_size=10, max_overflow=90)


def build_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)
