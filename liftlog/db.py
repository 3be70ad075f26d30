import logging

from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, DeclarativeBase
from .settings import get_settings

log = logging.getLogger(__name__)
settings = get_settings()

def _engine_kwargs(url: str) -> dict:
    kwargs: dict = {"pool_pre_ping": True, "echo": settings.SQL_ECHO}
    if url.startswith("sqlite"):
        # TestClient and uvicorn run sync routes on worker threads
        kwargs["connect_args"] = {"check_same_thread": False}
    return kwargs

# Create the SQLAlchemy engine
engine = create_engine(settings.SQLALCHEMY_URL, **_engine_kwargs(settings.SQLALCHEMY_URL))

if engine.dialect.name == "sqlite":
    @event.listens_for(engine, "connect")
    def set_sqlite_pragma(dbapi_conn, connection_record):
        """SQLite ignores ON DELETE rules unless foreign keys are switched on per connection."""
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()
        log.debug("sqlite connection opened with foreign_keys=ON")

# Define the base class that all models should inherit from
class Base(DeclarativeBase):
    pass

# Session factory
SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)

# Dependency for FastAPI routes
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
