"""Serial port discovery for the UART transport."""

from __future__ import annotations

from serial.tools.list_ports import comports

from poslink_demo.utils.logging import get_logger

logger = get_logger(__name__)


def list_serial_ports() -> list[str]:
    """Return device names of the serial ports present on this host."""
    ports = sorted(p.device for p in comports())
    logger.debug("serial_ports_scanned", count=len(ports))
    return ports
