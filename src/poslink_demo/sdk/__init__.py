"""Boundary with the vendor POSLink SDK."""

from poslink_demo.sdk.connector import PosLinkConnector, Terminal, TerminalConnector
from poslink_demo.sdk.loader import load_sdk, reset_sdk
from poslink_demo.sdk.models import InitResult
from poslink_demo.sdk.simulator import SimulatedConnector, SimulatedTerminal

__all__ = [
    "InitResult",
    "PosLinkConnector",
    "SimulatedConnector",
    "SimulatedTerminal",
    "Terminal",
    "TerminalConnector",
    "load_sdk",
    "reset_sdk",
]
