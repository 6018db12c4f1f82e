"""FastAPI application factory and configuration."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from poslink_demo import __version__
from poslink_demo.config.parameters import ParameterStore
from poslink_demo.core.dispatcher import ActionDispatcher
from poslink_demo.sdk.connector import PosLinkConnector, TerminalConnector
from poslink_demo.utils.logging import get_logger, is_configured, setup_logging

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan handler for startup/shutdown."""
    if not is_configured():
        setup_logging()
    logger.info("poslink_api_starting")
    yield
    app.state.dispatcher.cancel()
    logger.info("poslink_api_stopped")


def create_app(
    store: ParameterStore | None = None,
    connector: TerminalConnector | None = None,
    enable_ui: bool = True,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        store: Connection parameters shared by the API and the UI. A store
               with default parameters is created if omitted.
        connector: SDK boundary. Defaults to the vendor POSLink SDK.
        enable_ui: Whether to mount the NiceGUI dashboard.

    Returns:
        Configured FastAPI application instance.
    """
    app = FastAPI(
        title="POSLink Demo API",
        description="Configure a terminal transport and send it Init",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.store = store or ParameterStore()
    app.state.dispatcher = ActionDispatcher(
        app.state.store,
        connector or PosLinkConnector(),
    )

    from poslink_demo.api.routes import settings, terminal
    app.include_router(settings.router, prefix="/api")
    app.include_router(terminal.router, prefix="/api")

    if enable_ui:
        from poslink_demo.ui.main import setup_ui
        setup_ui(app, app.state.store, app.state.dispatcher)

    return app


def get_store(request: Request) -> ParameterStore:
    return request.app.state.store


def get_dispatcher(request: Request) -> ActionDispatcher:
    return request.app.state.dispatcher
