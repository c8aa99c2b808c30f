"""Non-blocking database connection tracking."""
from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from loguru import logger
from sqlalchemy import text
from sqlalchemy.engine import Engine

from storefront.db.base import Base


class ConnectionStatus(str, Enum):
    PENDING = "pending"
    CONNECTED = "connected"
    FAILED = "failed"


@dataclass(frozen=True)
class ConnectionState:
    """Snapshot of the startup connection attempt."""

    status: ConnectionStatus
    reason: str | None = None
    changed_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class DatabaseConnector:
    """Connect to the database in the background and expose the outcome.

    Serving requests never waits on :meth:`connect`; handlers that need
    persistence consult :attr:`state` instead.
    """

    def __init__(self, engine: Engine, *, auto_create: bool = False) -> None:
        self.engine = engine
        self.auto_create = auto_create
        self._state = ConnectionState(ConnectionStatus.PENDING)
        self._task: asyncio.Task | None = None

    @property
    def state(self) -> ConnectionState:
        return self._state

    @property
    def is_failed(self) -> bool:
        return self._state.status is ConnectionStatus.FAILED

    def _ping(self) -> None:
        with self.engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        if self.auto_create:
            Base.metadata.create_all(bind=self.engine)

    async def connect(self) -> ConnectionState:
        """Attempt the connection; failures are recorded, never raised."""

        try:
            await asyncio.to_thread(self._ping)
        except Exception as exc:
            self._state = ConnectionState(ConnectionStatus.FAILED, reason=str(exc))
            logger.error("Database connection error", error=str(exc))
        else:
            self._state = ConnectionState(ConnectionStatus.CONNECTED)
            logger.info("Database connected", url=self.engine.url.render_as_string())
        return self._state

    def start(self) -> asyncio.Task:
        """Schedule :meth:`connect` on the running loop without awaiting it."""

        if self._task is None:
            self._task = asyncio.get_running_loop().create_task(self.connect())
        return self._task
