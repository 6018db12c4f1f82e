"""Terminal action API endpoints."""

from __future__ import annotations

import asyncio

from fastapi import APIRouter, Depends, HTTPException

from poslink_demo.api.app import get_dispatcher
from poslink_demo.core.dispatcher import ActionDispatcher
from poslink_demo.exceptions import PosLinkDemoError
from poslink_demo.transport.serial_ports import list_serial_ports

router = APIRouter(tags=["terminal"])


@router.post("/init")
async def init_terminal(dispatcher: ActionDispatcher = Depends(get_dispatcher)) -> dict:
    """Send Init to the terminal and return the report text.

    A newer Init request supersedes this one; the superseded request gets 409.
    """
    try:
        report = await asyncio.wrap_future(dispatcher.run_init())
    except PosLinkDemoError as exc:
        raise HTTPException(status_code=503, detail=str(exc)) from exc
    except Exception as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc

    if report is None:
        raise HTTPException(status_code=409, detail="Superseded by a newer Init request")
    return {"report": report}


@router.get("/serial-ports")
async def serial_ports() -> list[str]:
    """Scan for serial ports usable with the UART transport."""
    return await asyncio.to_thread(list_serial_ports)
