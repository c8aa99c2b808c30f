"""Celery application instance and configuration."""
from __future__ import annotations

from celery import Celery

from storefront.config import settings


def _resolve_broker_url() -> str:
    if settings.CELERY_BROKER_URL:
        return settings.CELERY_BROKER_URL
    if settings.REDIS_URL:
        return settings.REDIS_URL
    return "memory://"


def _resolve_result_backend() -> str | None:
    return settings.CELERY_RESULT_BACKEND or settings.REDIS_URL


celery_app = Celery(
    "storefront",
    broker=_resolve_broker_url(),
    backend=_resolve_result_backend(),
    include=["storefront.tasks.notifications"],
)

celery_app.conf.update(
    task_serializer="json",
    accept_content=["json"],
    result_serializer="json",
    timezone="UTC",
    enable_utc=True,
    task_track_started=True,
    task_time_limit=5 * 60,
    task_soft_time_limit=4 * 60,
    worker_prefetch_multiplier=1,
)

__all__ = ["celery_app"]
