"""Startup sequencing: from configuration to a listening or exported app."""
from __future__ import annotations

import platform
from contextlib import asynccontextmanager
from enum import Enum
from typing import AsyncIterator, Iterable, List

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from sqlalchemy.engine import Engine

from storefront import __version__
from storefront.api.middleware import install_error_handling
from storefront.api.router import RouteMount, mount_routes
from storefront.config import Settings, get_settings
from storefront.core.push import configure_push
from storefront.core.reporting import ErrorReporter
from storefront.core.runtime import RuntimeMode
from storefront.db import session as db_session
from storefront.db.connector import DatabaseConnector
from storefront.services.realtime import ChatConnectionManager


class StartupState(str, Enum):
    INITIALIZING = "initializing"
    CONFIGURING_MIDDLEWARE = "configuring_middleware"
    CONNECTING_DATABASE = "connecting_database"
    CONFIGURING_PUSH = "configuring_push"
    MOUNTING_ROUTES = "mounting_routes"
    LISTENING = "listening"
    EXPORTED = "exported"


class StartupSequencer:
    """Assemble the application in a fixed order and hand it to its host.

    ``build`` wires middleware, the database connector, the realtime channel
    (development only), push configuration and routes. ``serve`` binds a
    socket in development; in production the app is only ``export``-ed for
    an external ASGI host.

    CONNECTING_DATABASE only attaches a pending ``DatabaseConnector`` to the
    app. The connection attempt itself is launched by the lifespan once the
    host starts the app, after MOUNTING_ROUTES, and is never awaited; requests
    may arrive while it is still pending.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        engine: Engine | None = None,
        routers: Iterable[RouteMount] | None = None,
        error_reporter: ErrorReporter | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.mode = RuntimeMode.resolve(self.settings.ENVIRONMENT)
        self.engine = engine
        self.routers = routers
        self.error_reporter = error_reporter or ErrorReporter.from_webhook(
            self.settings.ALERT_WEBHOOK_URL
        )
        self.state = StartupState.INITIALIZING
        self.history: List[StartupState] = [StartupState.INITIALIZING]
        self.app: FastAPI | None = None

    def _transition(self, state: StartupState) -> None:
        self.state = state
        self.history.append(state)
        logger.debug("Startup state changed", state=state.value, mode=self.mode.value)

    @asynccontextmanager
    async def _lifespan(self, app: FastAPI) -> AsyncIterator[None]:
        self.error_reporter.install()
        # Serving starts without waiting for the database.
        task = app.state.database.start()
        yield
        if not task.done():
            task.cancel()

    def build(self) -> FastAPI:
        if self.app is not None:
            return self.app

        settings = self.settings
        logger.info("Python version", version=platform.python_version())

        app = FastAPI(
            title=settings.PROJECT_NAME,
            description="E-commerce storefront API.",
            version=__version__,
            lifespan=self._lifespan,
        )
        app.state.settings = settings
        app.state.mode = self.mode
        app.state.error_reporter = self.error_reporter

        self._transition(StartupState.CONFIGURING_MIDDLEWARE)
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.BACKEND_CORS_ORIGINS,
            allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
            allow_methods=["*"],
            allow_headers=["*"],
        )

        self._transition(StartupState.CONNECTING_DATABASE)
        app.state.database = DatabaseConnector(
            self.engine or db_session.engine, auto_create=settings.DATABASE_AUTO_CREATE
        )

        realtime_enabled = not self.mode.is_production
        app.state.realtime = (
            ChatConnectionManager(redis_url=settings.REDIS_URL) if realtime_enabled else None
        )

        self._transition(StartupState.CONFIGURING_PUSH)
        app.state.push = configure_push(settings)

        self._transition(StartupState.MOUNTING_ROUTES)
        app.state.mounted_routes = mount_routes(
            app,
            settings.API_PREFIX,
            realtime_enabled=realtime_enabled,
            routers=self.routers,
        )
        install_error_handling(app)

        self.app = app
        return app

    def export(self) -> FastAPI:
        """Build without binding; an external host invokes the ASGI app."""

        app = self.build()
        if self.state is not StartupState.EXPORTED:
            self._transition(StartupState.EXPORTED)
            logger.info("Server initialized in production mode", mode=self.mode.value)
        return app

    def serve(self) -> FastAPI:
        """Bind ``HOST:PORT`` in development; export only in production."""

        if self.mode.is_production:
            return self.export()

        app = self.build()
        self._transition(StartupState.LISTENING)
        logger.info(
            "Server is running in {} mode on port {}",
            self.settings.ENVIRONMENT,
            self.settings.PORT,
            url=f"http://localhost:{self.settings.PORT}",
        )
        uvicorn.run(
            app,
            host=self.settings.HOST,
            port=self.settings.PORT,
            log_level=self.settings.LOG_LEVEL.lower(),
        )
        return app
