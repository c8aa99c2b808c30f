"""Realtime chat channel: WebSocket connections with optional Redis presence."""
from __future__ import annotations

import asyncio
import uuid
from collections import defaultdict
from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import WebSocket
from loguru import logger

try:  # pragma: no cover - optional dependency guard
    import redis.asyncio as redis
except ImportError:  # pragma: no cover
    redis = None  # type: ignore


class ChatConnectionManager:
    """Track live WebSocket connections per user.

    A user may hold several connections (tabs, devices); every message
    addressed to that user is fanned out to all of them.
    """

    def __init__(self, redis_url: str | None = None, namespace: str = "ws:presence") -> None:
        self.redis_url = redis_url
        self.namespace = namespace
        self._redis: redis.Redis | None = None  # type: ignore[name-defined]
        self._lock = asyncio.Lock()
        self._connections: Dict[uuid.UUID, Dict[uuid.UUID, WebSocket]] = defaultdict(dict)

    async def _get_redis(self) -> "redis.Redis | None":  # type: ignore[name-defined]
        if not self.redis_url or redis is None:
            return None
        if self._redis is None:
            self._redis = redis.from_url(
                self.redis_url,
                encoding="utf-8",
                decode_responses=True,
                socket_timeout=1.5,
            )
        return self._redis

    async def connect(self, *, websocket: WebSocket, user_id: uuid.UUID) -> uuid.UUID:
        """Accept and register a connection; returns its identifier."""

        await websocket.accept()
        connection_id = uuid.uuid4()
        async with self._lock:
            self._connections[user_id][connection_id] = websocket
        redis_client = await self._get_redis()
        if redis_client:
            try:
                await redis_client.hset(
                    self.namespace, str(user_id), datetime.now(timezone.utc).isoformat()
                )
            except Exception as exc:  # pragma: no cover - redis optional
                logger.warning("Failed to persist presence in Redis", error=str(exc))
        logger.info("WebSocket connected", user_id=str(user_id))
        return connection_id

    async def disconnect(self, *, user_id: uuid.UUID, connection_id: uuid.UUID) -> None:
        async with self._lock:
            user_connections = self._connections.get(user_id, {})
            user_connections.pop(connection_id, None)
            still_online = bool(user_connections)
            if not still_online:
                self._connections.pop(user_id, None)
        redis_client = await self._get_redis()
        if redis_client and not still_online:
            try:
                await redis_client.hdel(self.namespace, str(user_id))
            except Exception as exc:  # pragma: no cover - redis optional
                logger.warning("Failed to clean Redis presence", error=str(exc))
        logger.info("WebSocket disconnected", user_id=str(user_id))

    async def send_to_user(self, user_id: uuid.UUID, message: dict[str, Any]) -> int:
        """Send ``message`` to every connection of ``user_id``; returns deliveries."""

        async with self._lock:
            targets = list(self._connections.get(user_id, {}).values())
        delivered = 0
        for connection in targets:
            try:
                await connection.send_json(message)
            except Exception as exc:
                logger.warning("Failed to deliver chat message", user_id=str(user_id), error=str(exc))
            else:
                delivered += 1
        return delivered

    async def is_online(self, user_id: uuid.UUID) -> bool:
        async with self._lock:
            if self._connections.get(user_id):
                return True
        redis_client = await self._get_redis()
        if redis_client:
            try:
                return bool(await redis_client.hexists(self.namespace, str(user_id)))
            except Exception as exc:  # pragma: no cover - redis optional
                logger.warning("Failed to read Redis presence", error=str(exc))
        return False
