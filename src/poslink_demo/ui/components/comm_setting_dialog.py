"""Comm Setting dialog - edit the transport and its connection fields."""

from __future__ import annotations

from nicegui import run, ui

from poslink_demo.config.parameters import ParameterStore
from poslink_demo.config.settings_form import BAUD_RATES, FIELD_LABELS, SettingsForm
from poslink_demo.exceptions import InvalidSettingError
from poslink_demo.transport import TransportKind
from poslink_demo.transport.serial_ports import list_serial_ports
from poslink_demo.ui.theme import COLORS, card_style
from poslink_demo.utils.logging import get_logger

logger = get_logger(__name__)


def open_comm_setting_dialog(store: ParameterStore) -> ui.dialog:
    """Open the Comm Setting dialog on a fresh copy of the store's values.

    Switching the transport only swaps the visible fields; the store is
    written when OK is pressed and the fields parse.
    """
    form = SettingsForm.from_parameters(store.snapshot())
    serial_options: list[str] = [form.serial_port]
    baud_options = [str(rate) for rate in BAUD_RATES]
    if form.baud_rate not in baud_options:
        baud_options.append(form.baud_rate)

    with ui.dialog() as dialog, ui.card().classes("p-4").style(
        f"min-width: 380px; {card_style()}"
    ):
        ui.label("Comm Setting").classes("text-h6").style(
            f"color: {COLORS.text_primary}"
        )

        ui.select(
            [kind.value for kind in TransportKind],
            value=form.kind,
            label="Comm Type",
            on_change=lambda _: fields.refresh(),
        ).bind_value(form, "kind").classes("w-full")

        @ui.refreshable
        def fields() -> None:
            for name in form.visible_fields():
                label = FIELD_LABELS[name]
                if name == "serial_port":
                    ui.select(
                        serial_options,
                        value=form.serial_port,
                        label=label,
                        with_input=True,
                        new_value_mode="add-unique",
                    ).bind_value(form, "serial_port").classes("w-full")
                elif name == "baud_rate":
                    ui.select(
                        baud_options,
                        value=form.baud_rate,
                        label=label,
                        with_input=True,
                        new_value_mode="add-unique",
                    ).bind_value(form, "baud_rate").classes("w-full")
                else:
                    ui.input(label=label).bind_value(form, name).classes("w-full")

        fields()

        def confirm() -> None:
            try:
                params = form.apply(store)
            except InvalidSettingError as exc:
                logger.warning("comm_setting_rejected", field=exc.field, value=exc.value)
                ui.notify(str(exc), type="negative")
                return
            ui.notify(f"{params.kind} settings saved", type="positive")
            dialog.close()

        async def load_serial_ports() -> None:
            try:
                ports = await run.io_bound(list_serial_ports)
            except Exception as exc:
                logger.warning("serial_port_scan_failed", error=str(exc))
                return
            for port in ports:
                if port not in serial_options:
                    serial_options.append(port)
            if form.shows_serial_fields():
                fields.refresh()

        with ui.row().classes("w-full justify-end gap-2 mt-2"):
            ui.button("Cancel", on_click=dialog.close).props("flat")
            ui.button("OK", icon="check", on_click=confirm).style(
                f"background: {COLORS.blue}"
            )

        ui.timer(0.1, load_serial_ports, once=True)

    dialog.on("hide", dialog.delete)
    dialog.open()
    return dialog
