"""
Database configuration and session management.
"""

import logging
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool
from app.config import settings

logger = logging.getLogger("smartcanteen.database")

# Create SQLAlchemy Base
Base = declarative_base()


def _engine_options(url: str) -> dict:
    options = {"echo": settings.db_echo, "future": True}
    if url.startswith("sqlite"):
        # in-memory SQLite must be shared by every session and worker thread
        options["connect_args"] = {"check_same_thread": False}
        options["poolclass"] = StaticPool
    else:
        options["pool_pre_ping"] = True
    return options


# Create engine
engine = create_engine(settings.database_url, **_engine_options(settings.database_url))

# Create session factory
SessionLocal = sessionmaker(bind=engine, future=True, expire_on_commit=False)


def init_database():
    """Initialize database schema"""
    # Import model modules so every table is registered on Base.metadata
    from domain.models import profile, menu_item, meal_order  # noqa: F401

    with engine.begin() as conn:
        Base.metadata.create_all(bind=conn)
    logger.info("Database tables created successfully")


def get_db_session():
    """Get database session (for FastAPI dependency injection)"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
