"""Shared page layout with header and content area."""

from __future__ import annotations

from typing import Callable

from nicegui import ui

from poslink_demo.config.parameters import ParameterStore
from poslink_demo.ui.theme import COLORS, GLOBAL_CSS


def page_layout(title: str, content_fn: Callable, store: ParameterStore) -> None:
    """Create the standard page layout.

    Args:
        title: Page title displayed in the header.
        content_fn: Callable that builds the page content.
        store: Connection parameters, summarised in the header badge.
    """
    ui.add_css(GLOBAL_CSS)
    ui.dark_mode(True)
    ui.colors(primary=COLORS.cyan, secondary=COLORS.blue, accent=COLORS.purple)

    with ui.header(elevated=True).classes("q-pa-sm"):
        with ui.row().classes("w-full items-center no-wrap q-gutter-md"):
            ui.icon("point_of_sale").style(f"color: {COLORS.cyan}; font-size: 1.5rem;")
            ui.label("POSLINK").classes("text-h6 text-bold").style(
                f"color: {COLORS.cyan}; letter-spacing: 0.15em;"
            )
            ui.label("|").style(f"color: {COLORS.text_muted};")
            ui.label(title).classes("text-subtitle2").style(
                f"color: {COLORS.text_secondary};"
            )

            ui.space()

            with ui.row().classes("items-center q-gutter-xs"):
                ui.icon("settings_ethernet").style(
                    f"color: {COLORS.text_secondary}; font-size: 1rem;"
                )
                ui.label().classes("text-caption").style(
                    f"color: {COLORS.text_secondary};"
                ).bind_text_from(store, "kind", backward=lambda kind: f"{kind} transport")

    with ui.column().classes("q-pa-md w-full").style(
        f"background-color: {COLORS.bg_primary};"
    ):
        content_fn()
