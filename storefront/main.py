"""FastAPI application factory and process entry point."""
from __future__ import annotations

from typing import Iterable

from fastapi import FastAPI
from sqlalchemy.engine import Engine

from storefront.api.router import RouteMount
from storefront.config import Settings, settings
from storefront.core.logging import configure_logging
from storefront.lifecycle import StartupSequencer


def create_app(
    app_settings: Settings | None = None,
    *,
    engine: Engine | None = None,
    routers: Iterable[RouteMount] | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application instance."""

    return StartupSequencer(app_settings or settings, engine=engine, routers=routers).build()


configure_logging(settings.LOG_LEVEL)
sequencer = StartupSequencer(settings)
app = sequencer.export() if sequencer.mode.is_production else sequencer.build()


def main() -> None:
    """Console entry point: listen in development, export only in production."""

    sequencer.serve()


if __name__ == "__main__":
    main()
