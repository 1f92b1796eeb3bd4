"""
Database Connection Module
"""
import logging
from sqlalchemy import create_engine, text
from sqlalchemy.orm import sessionmaker, declarative_base
from contextlib import contextmanager

from robotikhub.config import get_settings

settings = get_settings()
logger = logging.getLogger(__name__)

# Base class for models
Base = declarative_base()


def _engine_options() -> dict:
    """Pool settings for MySQL; SQLite gets a thread-shareable connection instead"""
    if settings.is_sqlite:
        return {"connect_args": {"check_same_thread": False}}
    return {
        "pool_pre_ping": True,
        "pool_recycle": 1800,  # Recycle connections every 30 minutes
        "pool_size": 10,
        "max_overflow": 20,
        "pool_timeout": 10,
    }


engine = create_engine(settings.database_url, echo=False, **_engine_options())

# Session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@contextmanager
def get_db_context():
    """Context manager untuk database session"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db():
    """Buat semua tabel dan seed baris profil klub (id=1) jika belum ada"""
    # Import models so they register on Base.metadata
    from robotikhub import models  # noqa: F401
    from robotikhub.models import ClubProfile

    Base.metadata.create_all(bind=engine)
    with get_db_context() as db:
        if db.get(ClubProfile, 1) is None:
            db.add(ClubProfile(id=1, history="", vision=""))
            db.commit()
            logger.info("Seeded club profile row")


def test_connection() -> dict:
    """Test database connection"""
    try:
        with get_db_context() as db:
            result = db.execute(text("SELECT 1"))
            result.fetchone()
            return {"status": "connected", "database": settings.db_name}
    except Exception as e:
        logger.error(f"Database ping failed: {e}")
        return {"status": "error", "message": str(e)}
