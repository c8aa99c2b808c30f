"""Supervisory error reporting for failures outside a request."""
from __future__ import annotations

import asyncio
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Iterable, List

import httpx
from loguru import logger
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

AlertHook = Callable[[BaseException, Dict[str, Any]], None]


class WebhookAlert:
    """Alert hook posting a JSON summary of the error to a webhook."""

    def __init__(self, url: str, timeout: float = 3.0) -> None:
        self.url = url
        self.timeout = timeout

    @retry(
        retry=retry_if_exception_type(httpx.HTTPError),
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=0.5, min=0.5, max=4),
        reraise=True,
    )
    def __call__(self, exc: BaseException, context: Dict[str, Any]) -> None:
        payload = {
            "error": str(exc),
            "type": type(exc).__name__,
            "context": {key: str(value) for key, value in context.items()},
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        response = httpx.post(self.url, json=payload, timeout=self.timeout)
        response.raise_for_status()


class ErrorReporter:
    """Log unhandled errors with their stack trace and fan out to alert hooks.

    Reporting never raises: the process keeps running after an isolated
    failure and a broken hook only produces a warning.
    """

    def __init__(self, hooks: Iterable[AlertHook] = ()) -> None:
        self._hooks: List[AlertHook] = list(hooks)

    @classmethod
    def from_webhook(cls, url: str | None) -> "ErrorReporter":
        return cls([WebhookAlert(url)] if url else [])

    def add_hook(self, hook: AlertHook) -> None:
        self._hooks.append(hook)

    def report(self, exc: BaseException, **context: Any) -> None:
        logger.opt(exception=exc).error("Unhandled error", error=str(exc), **context)
        for hook in self._hooks:
            try:
                hook(exc, context)
            except Exception as hook_exc:
                logger.warning(
                    "Alert hook failed",
                    hook=getattr(hook, "__name__", type(hook).__name__),
                    error=str(hook_exc),
                )

    def handle_loop_exception(
        self, loop: asyncio.AbstractEventLoop, context: Dict[str, Any]
    ) -> None:
        """``asyncio`` exception handler for orphaned task failures."""

        exc = context.get("exception")
        detail = context.get("message", "Unhandled exception in event loop")
        if exc is None:
            logger.error("Event loop error", detail=detail)
            return
        self.report(exc, source="event_loop", detail=detail)

    def install(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        """Register as the exception handler of ``loop`` (default: running loop)."""

        loop = loop or asyncio.get_running_loop()
        loop.set_exception_handler(self.handle_loop_exception)
