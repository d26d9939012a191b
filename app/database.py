"""
Database store handle.

The engine and session factory live on a ``Store`` that the application opens
at startup and closes at shutdown. Request handlers get their session through
``get_db``, which reads the store from ``request.app.state``.
"""
import time
import logging
from typing import Iterator, Optional

from fastapi import Request
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Base class for models
Base = declarative_base()


def normalize_database_url(url: str) -> str:
    """Strip stray quotes/whitespace and fix the legacy ``postgres://`` scheme."""
    url = url.strip().strip("'").strip('"')

    # SQLALCHEMY COMPATIBILITY: Fix 'postgres://' to 'postgresql://'
    if url.startswith("postgres://"):
        url = url.replace("postgres://", "postgresql://", 1)

    return url


def create_store_engine(db_url: str) -> Engine:
    """Create SQLAlchemy engine with pooling suited to the backend."""
    if db_url.startswith("sqlite"):
        # One shared connection so in-memory databases survive across sessions
        return create_engine(
            db_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )

    # Sanitized host logging
    host = db_url.split("@")[1].split(":")[0] if "@" in db_url else "unknown"
    logger.info(f"Configuring database engine for host: {host}")

    return create_engine(
        db_url,
        pool_pre_ping=True,
        pool_recycle=300,
        pool_size=5,
        max_overflow=10,
        connect_args={
            "connect_timeout": 10,
            "options": "-c statement_timeout=30000"
        }
    )


class Store:
    """Owns the connection pool for the lifetime of the application."""

    def __init__(self, database_url: str):
        self.database_url = normalize_database_url(database_url)
        self.engine: Optional[Engine] = None
        self._session_factory = None

    @property
    def is_open(self) -> bool:
        return self.engine is not None

    def open(self, create_tables: bool = False, max_retries: int = 5, delay: int = 3) -> bool:
        """Create the engine, wait for the database and optionally sync models."""
        if self.engine is None:
            self.engine = create_store_engine(self.database_url)
            self._session_factory = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

        if not self.connect_with_retry(max_retries=max_retries, delay=delay):
            logger.critical("DATABASE UNREACHABLE: store opened without a live connection.")
            return False

        if create_tables:
            # Models must be imported so Base knows about every table
            import app.models.user
            import app.models.customer
            import app.models.order

            _ = [app.models.user.User, app.models.customer.Customer, app.models.order.Order]

            Base.metadata.create_all(bind=self.engine)
            logger.info("Database schema is up to date.")
        return True

    def close(self) -> None:
        """Dispose of the pool; safe to call more than once."""
        if self.engine is not None:
            self.engine.dispose()
            logger.info("Database connection pool closed.")
        self.engine = None
        self._session_factory = None

    def connect_with_retry(self, max_retries: int = 5, delay: int = 3) -> bool:
        """Linear backoff while the database comes up."""
        last_error = None
        for attempt in range(max_retries):
            try:
                with self.engine.connect() as conn:
                    conn.execute(text("SELECT 1"))
                    logger.info("Database connection established successfully.")
                    return True
            except Exception as e:
                last_error = e
                wait = delay * (attempt + 1)
                logger.warning(f"DB Connection attempt {attempt + 1} failed. Retrying in {wait}s...")
                time.sleep(wait)
        logger.error(f"Failed to connect: {last_error}")
        return False

    def session(self) -> Session:
        if self._session_factory is None:
            raise RuntimeError("Store is not open")
        return self._session_factory()

    def check_health(self) -> bool:
        if self.engine is None:
            return False
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.warning(f"Database health check failed: {e}")
            return False


def get_db(request: Request) -> Iterator[Session]:
    store: Store = request.app.state.store
    db = store.session()
    try:
        yield db
    finally:
        db.close()
