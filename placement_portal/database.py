import logging

from sqlalchemy import create_engine, inspect
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker, declarative_base

from placement_portal.config import settings

logger = logging.getLogger(__name__)


def _engine_options(database_url: str) -> dict:
    options = {"pool_pre_ping": True}
    if make_url(database_url).get_backend_name() == "sqlite":
        # Request handlers run in a threadpool; SQLite connections must be shareable.
        options["connect_args"] = {"check_same_thread": False}
    return options


engine = create_engine(settings.database_url, **_engine_options(settings.database_url))
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def _register_models() -> None:
    # Table classes attach themselves to Base.metadata on import.
    import placement_portal.models  # noqa: F401


def init_db():
    _register_models()
    try:
        Base.metadata.create_all(bind=engine)
        logger.info("Portal schema ready (%d tables)", len(Base.metadata.tables))
    except Exception as e:
        logger.exception("Database initialization failed: %s", e)
        raise


def ensure_tables_exist() -> list[str]:
    """Create the portal tables the database lacks; returns their names. Existing rows are untouched."""
    _register_models()
    try:
        before = set(inspect(engine).get_table_names())
        Base.metadata.create_all(bind=engine)
        missing = sorted(set(Base.metadata.tables) - before)
    except Exception as e:
        logger.exception("Ensure tables failed: %s", e)
        raise
    if missing:
        logger.info("Created missing tables: %s", ", ".join(missing))
    else:
        logger.info("Schema already complete; nothing created")
    return missing
