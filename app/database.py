"""Database configuration and session management."""

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from app.config import settings
from app.utils.logger import logger

# SQLite connections are shared across the threadpool FastAPI runs sync work in
_connect_args = (
    {"check_same_thread": False} if settings.database_url.startswith("sqlite") else {}
)

# Create engine
engine = create_engine(settings.database_url, echo=settings.debug, connect_args=_connect_args)

# Create session factory
SessionLocal = sessionmaker(
    bind=engine,
    autocommit=False,
    autoflush=False,
)

# Create base class for models
Base = declarative_base()


def get_db():
    """Get database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db():
    """Create all tables, then seed the admin account and sample catalog if empty.

    Schema migrations are not managed here: tables are created with
    ``create_all`` which leaves existing tables untouched.
    """
    import app.models  # noqa: F401  registers all models with Base.metadata

    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created")

    from app.seed import seed_if_empty

    seed_if_empty(engine)
