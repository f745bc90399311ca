"""
Local SQLite store: engine, session factory and the multi-collection transaction.

One ``LocalStore`` per process, opened lazily on first access by
``get_store()``. Opening creates the schema and seeds the default statuses.
"""

from contextlib import contextmanager
from pathlib import Path
from threading import Lock
from typing import TYPE_CHECKING, Generator, Iterator, Optional

import structlog
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from synergia.config import get_settings
from synergia.core.exceptions import StorageUnavailableException

if TYPE_CHECKING:
    from synergia.infrastructure.repositories.entity_repository import EntityRepository

logger = structlog.get_logger(__name__)

Base = declarative_base()


def _enable_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(url: str) -> Engine:
    """Create the engine; in-memory SQLite shares one connection across threads."""
    parsed = make_url(url)
    is_sqlite = parsed.get_backend_name() == "sqlite"
    kwargs = {}

    if is_sqlite:
        kwargs["connect_args"] = {"check_same_thread": False}
        if parsed.database in (None, "", ":memory:"):
            kwargs["poolclass"] = StaticPool
        else:
            Path(parsed.database).parent.mkdir(parents=True, exist_ok=True)

    engine = create_engine(url, **kwargs)
    if is_sqlite:
        event.listen(engine, "connect", _enable_foreign_keys)
    return engine


class LocalStore:
    """Owns the engine and hands out sessions bound to it."""

    def __init__(self, url: str):
        self.url = url
        try:
            self.engine = build_engine(url)
        except (OSError, SQLAlchemyError) as exc:
            logger.error("Could not open local store", url=url, error=str(exc))
            raise StorageUnavailableException(
                "Não foi possível abrir o armazenamento local", details={"reason": str(exc)}
            ) from exc
        self.SessionLocal = sessionmaker(bind=self.engine, autoflush=False, expire_on_commit=False)

    def init_schema(self) -> None:
        """Create missing tables and seed default statuses."""
        # Importing the facade registers every model on Base.metadata
        from synergia.domain.models.user import User  # noqa: F401
        from synergia.infrastructure.repositories.entity_repository import EntityRepository

        try:
            Base.metadata.create_all(bind=self.engine)
        except SQLAlchemyError as exc:
            logger.error("Could not create local schema", url=self.url, error=str(exc))
            raise StorageUnavailableException(
                "Não foi possível preparar o armazenamento local", details={"reason": str(exc)}
            ) from exc

        db = self.session()
        try:
            seeded = EntityRepository(db).statuses.seed_defaults()
        finally:
            db.close()
        logger.info("Local store ready", url=self.url, seeded_statuses=seeded)

    def session(self) -> Session:
        return self.SessionLocal()

    @contextmanager
    def transaction(self) -> Iterator["EntityRepository"]:
        """All-or-nothing unit of work spanning every collection.

        Repositories handed out here flush instead of committing; the single
        commit happens when the block exits cleanly, anything raised inside
        rolls everything back.
        """
        from synergia.infrastructure.repositories.entity_repository import EntityRepository

        db = self.session()
        try:
            yield EntityRepository(db, autocommit=False)
            db.commit()
        except Exception as exc:
            try:
                db.rollback()
            except SQLAlchemyError as rollback_exc:
                logger.error("Rollback failed", error=str(rollback_exc), cause=str(exc))
                raise StorageUnavailableException(
                    "Falha ao desfazer a transação",
                    details={"rollback_failed": True, "reason": str(rollback_exc)},
                ) from exc
            raise
        finally:
            db.close()

    def dispose(self) -> None:
        self.engine.dispose()


_store: Optional[LocalStore] = None
_store_lock = Lock()


def get_store() -> LocalStore:
    """Process-wide store, opened on first access."""
    global _store
    with _store_lock:
        if _store is None:
            store = LocalStore(get_settings().DATABASE_URL)
            store.init_schema()
            _store = store
        return _store


def set_store(store: Optional[LocalStore]) -> None:
    """Swap the process-wide store (tests, alternative database files)."""
    global _store
    with _store_lock:
        _store = store


def get_db() -> Generator[Session, None, None]:
    db = get_store().session()
    try:
        yield db
    finally:
        db.close()
