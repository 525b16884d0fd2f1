"""Database engine and session factory"""

from functools import lru_cache

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from loan_origination.config import settings
from loan_origination.infrastructure.database.models import Base


def create_session_factory(database_url: str) -> sessionmaker:
    """Build an engine for database_url, create tables, and return a session factory"""
    engine = create_engine(database_url, pool_pre_ping=True)
    init_db(engine)
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(engine: Engine) -> None:
    """Create the blob table if it does not exist"""
    Base.metadata.create_all(bind=engine)


@lru_cache(maxsize=1)
def get_session_factory() -> sessionmaker:
    """Session factory for the configured database, created on first use"""
    return create_session_factory(settings.database_url)
