"""Database engine, session factory and declarative base."""

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from storerate.config import get_settings

settings = get_settings()

DATABASE_URL = settings.DATABASE_URL

# Heroku/Railway style URLs
if DATABASE_URL.startswith("postgres://"):
    DATABASE_URL = DATABASE_URL.replace("postgres://", "postgresql://", 1)

if DATABASE_URL.startswith("sqlite"):
    connect_args = {"check_same_thread": False}
else:
    connect_args = {}

# SQL echo goes through the structlog handler, see core.logging (DB_ECHO)
engine = create_engine(DATABASE_URL, connect_args=connect_args)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def init_db() -> None:
    """Create all tables (dev only — use migrations in production)."""
    # Import all models so SQLAlchemy knows about them
    from storerate.domain.models.user import User  # noqa: F401
    from storerate.domain.models.store import Store  # noqa: F401
    from storerate.domain.models.store_rating import StoreRating  # noqa: F401

    Base.metadata.create_all(bind=engine)
