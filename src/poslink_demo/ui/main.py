"""NiceGUI web dashboard setup and page registration."""

from __future__ import annotations

import os
import secrets

from fastapi import FastAPI
from nicegui import ui

from poslink_demo.config.parameters import ParameterStore
from poslink_demo.core.dispatcher import ActionDispatcher

STORAGE_SECRET_ENV = "POSLINK_STORAGE_SECRET"


def setup_ui(
    fastapi_app: FastAPI,
    store: ParameterStore,
    dispatcher: ActionDispatcher,
) -> None:
    """Register NiceGUI pages with the FastAPI application."""

    @ui.page("/")
    def index():
        from poslink_demo.ui.pages.main_window import main_window_page
        main_window_page(store, dispatcher)

    storage_secret = os.environ.get(STORAGE_SECRET_ENV) or secrets.token_hex(32)

    ui.run_with(
        fastapi_app,
        title="POSLink Demo",
        storage_secret=storage_secret,
    )
