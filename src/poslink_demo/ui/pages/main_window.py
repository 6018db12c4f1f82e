"""Main window - Comm Setting and Init buttons with the result pane."""

from __future__ import annotations

import asyncio

from nicegui import ui

from poslink_demo.config.parameters import ParameterStore
from poslink_demo.core.dispatcher import ActionDispatcher
from poslink_demo.ui.components.comm_setting_dialog import open_comm_setting_dialog
from poslink_demo.ui.layout import page_layout
from poslink_demo.ui.theme import COLORS, card_style
from poslink_demo.utils.logging import get_logger

logger = get_logger(__name__)


def main_window_page(store: ParameterStore, dispatcher: ActionDispatcher) -> None:
    """Render the main window."""

    def content():
        async def run_init():
            spinner.visible = True
            try:
                report = await asyncio.wrap_future(dispatcher.run_init())
            except Exception as exc:
                ui.notify(f"Init error: {exc}", type="negative")
                return
            finally:
                spinner.visible = dispatcher.busy
            if report is None:
                logger.debug("init_report_superseded")
                return
            result.value = report

        with ui.card().classes("w-full p-4").style(card_style()):
            with ui.row().classes("items-center gap-4"):
                ui.button(
                    "Comm Setting",
                    icon="settings",
                    on_click=lambda: open_comm_setting_dialog(store),
                ).style(f"background: {COLORS.blue}")
                ui.button("Init", icon="play_arrow", on_click=run_init)
                spinner = ui.spinner(size="sm").style(f"color: {COLORS.cyan}")
                spinner.visible = False

            result = ui.textarea(label="Result").props("readonly outlined autogrow").classes(
                "w-full mt-4"
            ).style("font-family: 'JetBrains Mono', monospace;")

    page_layout("Init Demo", content, store)
