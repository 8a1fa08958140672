import asyncio
import logging
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import URL, Connection, Engine, make_url
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from transport_booking.core.config import settings

logger = logging.getLogger(__name__)

Base = declarative_base()


def build_engine(
    url: URL | str,
    pool_size: int = settings.DB_POOL_SIZE,
    pool_timeout: Optional[float] = settings.DB_POOL_TIMEOUT,
) -> Engine:
    url = make_url(url)
    if url.get_backend_name() == "sqlite":
        options = {"connect_args": {"check_same_thread": False}}
        if url.database in (None, "", ":memory:"):
            # every session must see the same in-memory database
            options["poolclass"] = StaticPool
        return create_engine(url, **options)

    # No overflow: at most pool_size connections, extra callers queue for one
    return create_engine(url, pool_size=pool_size, max_overflow=0, pool_timeout=pool_timeout)


class ConnectionPool:
    """
    Acquire/release facade over the engine's connection pool.
    Routes that need a bounded wait (login) go through acquire_within();
    everything else uses a plain request session from get_db().
    """

    def __init__(self, engine: Engine):
        self.engine = engine

    def acquire(self) -> Connection:
        return self.engine.connect()

    def release(self, conn: Connection) -> None:
        conn.close()

    async def acquire_within(self, timeout: float) -> Connection:
        loop = asyncio.get_running_loop()
        pending = loop.run_in_executor(None, self.acquire)
        try:
            return await asyncio.wait_for(asyncio.shield(pending), timeout)
        except asyncio.TimeoutError:
            # the checkout may still succeed later; hand it straight back
            pending.add_done_callback(self._release_late)
            raise

    def _release_late(self, fut: asyncio.Future) -> None:
        if fut.cancelled() or fut.exception() is not None:
            return
        logger.debug("Releasing connection acquired after timeout")
        asyncio.get_running_loop().run_in_executor(None, self.release, fut.result())


engine = build_engine(settings.database_url)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
pool = ConnectionPool(engine)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_pool() -> ConnectionPool:
    return pool
