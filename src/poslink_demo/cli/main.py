"""POSLink demo CLI - run Init against a terminal from the command line."""

from __future__ import annotations

import json

import click

from poslink_demo.utils.logging import setup_logging

KIND_CHOICES = ["TCP", "SSL", "HTTP", "HTTPS", "UART"]

# Form field -> the `init` option that sets it.
FIELD_OPTIONS: dict[str, str] = {
    "kind": "--kind",
    "host": "--host",
    "port": "--port",
    "serial_port": "--serial-port",
    "baud_rate": "--baud",
    "timeout": "--timeout",
}


@click.group()
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option("--json-output", is_flag=True, help="Output in JSON format")
@click.pass_context
def cli(ctx: click.Context, debug: bool, json_output: bool) -> None:
    """POSLink demo - configure a terminal transport and send it Init."""
    ctx.ensure_object(dict)
    ctx.obj["debug"] = debug
    ctx.obj["json_output"] = json_output
    setup_logging(level="DEBUG" if debug else "WARNING", json_output=json_output)


@cli.command()
@click.pass_context
def settings(ctx: click.Context) -> None:
    """Show the default connection parameters."""
    from poslink_demo.config.parameters import ConnectionParameters

    params = ConnectionParameters()
    if ctx.obj.get("json_output"):
        click.echo(params.model_dump_json(indent=2))
        return
    click.echo(f"Transport:   {params.kind}")
    click.echo(f"Address:     {params.host}:{params.port}")
    click.echo(f"Serial port: {params.serial_port} @ {params.baud_rate} baud")
    click.echo(f"Timeout:     {params.timeout_ms:,} ms")


@cli.command()
@click.option("--kind", type=click.Choice(KIND_CHOICES, case_sensitive=False), default="TCP")
@click.option("--host", default=None, help="Terminal IP address")
@click.option("--port", default=None, help="Terminal port")
@click.option("--serial-port", default=None, help="Serial port for UART, e.g. COM1")
@click.option("--baud", default=None, help="Baud rate for UART")
@click.option("--timeout", default=None, help="Timeout in ms, e.g. 60,000")
@click.option("--simulate", is_flag=True, help="Use the simulated terminal instead of the SDK")
@click.pass_context
def init(
    ctx: click.Context,
    kind: str,
    host: str | None,
    port: str | None,
    serial_port: str | None,
    baud: str | None,
    timeout: str | None,
    simulate: bool,
) -> None:
    """Send Init to the terminal and print the report."""
    from poslink_demo.config.parameters import ParameterStore
    from poslink_demo.config.settings_form import SettingsForm
    from poslink_demo.core.dispatcher import ActionDispatcher
    from poslink_demo.core.reports import is_success_report
    from poslink_demo.exceptions import InvalidSettingError, PosLinkDemoError
    from poslink_demo.sdk.connector import PosLinkConnector
    from poslink_demo.sdk.simulator import SimulatedConnector

    store = ParameterStore()
    form = SettingsForm.from_parameters(store.snapshot())
    form.kind = kind.upper()
    for name, value in (
        ("host", host),
        ("port", port),
        ("serial_port", serial_port),
        ("baud_rate", baud),
        ("timeout", timeout),
    ):
        if value is not None:
            setattr(form, name, value)

    try:
        params = form.apply(store)
    except InvalidSettingError as exc:
        raise click.BadParameter(str(exc), param_hint=FIELD_OPTIONS.get(exc.field)) from exc

    connector = SimulatedConnector() if simulate else PosLinkConnector()
    dispatcher = ActionDispatcher(store, connector)
    try:
        report = dispatcher.run_init().result()
    except PosLinkDemoError as exc:
        raise click.ClickException(str(exc)) from exc

    succeeded = is_success_report(report)
    if ctx.obj.get("json_output"):
        click.echo(json.dumps({
            "settings": params.communication_setting().to_dict(),
            "success": succeeded,
            "report": report,
        }, indent=2))
    else:
        click.echo(report)

    if not succeeded:
        ctx.exit(1)


@cli.command()
@click.pass_context
def ports(ctx: click.Context) -> None:
    """List serial ports usable with the UART transport."""
    from poslink_demo.transport.serial_ports import list_serial_ports

    found = list_serial_ports()
    if ctx.obj.get("json_output"):
        click.echo(json.dumps(found, indent=2))
        return
    if not found:
        click.echo("No serial ports found.")
        return
    for name in found:
        click.echo(f"  {name}")


@cli.command()
@click.option("--host", default="127.0.0.1", help="Bind address (0.0.0.0 for network access)")
@click.option("--port", type=int, default=8000, help="HTTP port")
@click.option("--no-ui", is_flag=True, help="API only, no web dashboard")
@click.option("--simulate", is_flag=True, help="Use the simulated terminal instead of the SDK")
def serve(host: str, port: int, no_ui: bool, simulate: bool) -> None:
    """Start the web server (API + dashboard)."""
    import uvicorn

    from poslink_demo.api.app import create_app
    from poslink_demo.sdk.simulator import SimulatedConnector

    app = create_app(
        connector=SimulatedConnector(delay_s=1.0) if simulate else None,
        enable_ui=not no_ui,
    )
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    cli()
