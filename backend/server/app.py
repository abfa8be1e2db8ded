"""
FastAPI app factory.

Responsibilities:
- Create and configure FastAPI app
- Set up middleware and logging
- Own the process-wide PickerSession (started and closed with the app)
- Register routes
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config import AppConfig
from observability import logger
from session.picker_session import PickerSession
from sync.connection_manager import Opener

from server.routes import register_routes


def create_app(
    config: AppConfig | None = None,
    *,
    opener: Opener | None = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    `opener` replaces the real WebSocket dialer (tests, alternative
    transports). The sync connection is always torn down on shutdown.
    """
    config = config or AppConfig.load_from_env()

    logger.configure(level=config.log_level, enabled=config.enable_json_logs)

    session = PickerSession(config=config, opener=opener)

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        await session.start()
        try:
            yield
        finally:
            await session.close()

    app = FastAPI(title="Shade Picker API", lifespan=lifespan)

    app.state.config = config
    app.state.session = session

    # Middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # tighten later
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Routes
    register_routes(app)

    return app
