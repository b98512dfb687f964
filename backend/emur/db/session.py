"""
Database Session Management
Creates and manages SQLAlchemy database engine and session factory.

This module sets up the database connection from the explicit Settings
object and provides a session factory shared by the API and the forecast
worker.
"""

from typing import Generator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from emur.core.config import Settings, get_settings


def create_db_engine(settings: Settings) -> Engine:
    """
    Create the SQLAlchemy engine for the configured database.

    Configuration:
    - echo=settings.DEBUG: Log all SQL queries when debug mode is enabled
    - pool_pre_ping=True: Verify connections before using them
    - pool_recycle=3600: Recycle connections after 1 hour
    """
    url = settings.database_url
    connect_args = {}
    if url.startswith("sqlite"):
        # SQLite connections are shared with the threadpool running sync endpoints
        connect_args["check_same_thread"] = False

    return create_engine(
        url,
        echo=settings.DEBUG,
        pool_pre_ping=True,
        pool_recycle=3600,
        connect_args=connect_args,
    )


def create_session_factory(bind: Engine) -> sessionmaker:
    """
    Session factory bound to an engine.

    - autocommit=False: services call commit() once per use case
    - autoflush=False: repositories flush explicitly
    - expire_on_commit=False: entities stay readable after commit for serialization
    """
    return sessionmaker(
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
        bind=bind,
    )


# Process-wide engine and session factory
engine = create_db_engine(get_settings())
SessionLocal = create_session_factory(engine)


def get_db() -> Generator[Session, None, None]:
    """
    Dependency function that provides database sessions to FastAPI endpoints.

    Yields:
        Database session object

    Usage in FastAPI endpoint:
        @router.get("/items")
        def get_items(db: Session = Depends(get_db)):
            ...

    Uncommitted work is rolled back if the endpoint raises, and the session
    is always closed when the request finishes.
    """
    db = SessionLocal()
    try:
        yield db
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
