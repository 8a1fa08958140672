import asyncio
import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from starlette.concurrency import run_in_threadpool

from transport_booking.core.config import FallbackAccount
from transport_booking.core.db import ConnectionPool
from transport_booking.models.user import User

logger = logging.getLogger(__name__)

# Fixed id reported for demo-mode logins
DEMO_USER_ID = 1


class InvalidCredentials(Exception):
    """Unknown user, wrong password, or store unavailable: deliberately indistinguishable."""


class RoleMismatch(Exception):
    """Credentials matched a stored user, but not for the requested role."""


@dataclass
class LoginResult:
    id: int
    email: str
    name: str
    role: str
    demo: bool = False

    def summary(self) -> dict:
        return {"id": self.id, "email": self.email, "name": self.name, "role": self.role}


class Authenticator:
    """
    Two-tier login: the users table first, then a fixed table of demo
    accounts whenever the store lookup does not produce a match.
    """

    def __init__(self, pool: ConnectionPool, fallback_accounts: Iterable[FallbackAccount], acquire_timeout: float):
        self.pool = pool
        self.fallback_accounts = {a.email: a for a in fallback_accounts}
        self.acquire_timeout = acquire_timeout

    async def login(self, email: str, password: str, role: str) -> LoginResult:
        try:
            user = await self._lookup(email)
        except (asyncio.TimeoutError, SQLAlchemyError) as e:
            logger.warning("Login lookup failed, trying demo accounts: %s", e.__class__.__name__)
            user = None

        if user is not None and user.password_hash == password:
            if user.role != role:
                raise RoleMismatch()
            return LoginResult(id=user.id, email=user.email, name=user.name, role=user.role)

        return self._fallback(email, password, role)

    async def _lookup(self, email: str) -> Optional[User]:
        conn = await self.pool.acquire_within(self.acquire_timeout)
        try:
            return await run_in_threadpool(self._query_user, conn, email)
        finally:
            # returning a connection resets it on the server; keep that off the loop
            await run_in_threadpool(self.pool.release, conn)

    @staticmethod
    def _query_user(conn, email: str) -> Optional[User]:
        # attributes stay loaded on the detached row after the session closes
        with Session(bind=conn) as db:
            return db.query(User).filter(User.email == email).first()

    def _fallback(self, email: str, password: str, role: str) -> LoginResult:
        account = self.fallback_accounts.get(email)
        if account is None or account.password != password or account.role != role:
            raise InvalidCredentials()
        logger.info("Demo mode login for %s", email)
        return LoginResult(id=DEMO_USER_ID, email=email, name=account.name, role=account.role, demo=True)
