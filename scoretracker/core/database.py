import logging
import time

from sqlalchemy import create_engine, text
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from scoretracker.core.config import settings

logger = logging.getLogger(__name__)

def _engine_options(url: str) -> dict:
    if not url.startswith("sqlite"):
        return {"pool_pre_ping": True}
    options = {"connect_args": {"check_same_thread": False}}
    # A bare "sqlite://" is an in-memory database; every session must share one connection.
    if url in ("sqlite://", "sqlite:///:memory:"):
        options["poolclass"] = StaticPool
    return options

engine = create_engine(settings.database_url, **_engine_options(settings.database_url))
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()

def wait_for_database(retries: int = None, delay: float = None) -> None:
    """
    Blocks until the database accepts a connection.
    Retries with exponential backoff and re-raises the last error once retries are exhausted.
    """
    retries = max(1, retries if retries is not None else settings.DB_CONNECT_RETRIES) # always try once
    delay = delay if delay is not None else settings.DB_RETRY_DELAY

    logger.info(
        "Connecting to database: host=%s port=%s user=%s dbname=%s sslmode=%s",
        settings.DB_HOST, settings.DB_PORT, settings.DB_USER, settings.DB_NAME, settings.sslmode,
    )
    for attempt in range(1, retries + 1):
        try:
            with engine.connect() as connection:
                connection.execute(text("SELECT 1"))
            logger.info("Successfully connected to database")
            return
        except OperationalError as e:
            if attempt == retries:
                logger.error("Failed to connect to database after %d attempts", retries)
                raise
            logger.warning(
                "Failed to connect to database (attempt %d/%d): %s. Retrying in %.1fs...",
                attempt, retries, e, delay,
            )
            time.sleep(delay)
            delay *= 2

def init_db() -> None:
    # Import models so they are registered with Base before creating tables
    import scoretracker.models  # noqa: F401

    Base.metadata.create_all(bind=engine)
