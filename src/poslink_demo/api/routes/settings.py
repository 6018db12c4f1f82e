"""Connection settings API endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from poslink_demo.api.app import get_store
from poslink_demo.config.parameters import ConnectionParameters, ParameterStore
from poslink_demo.config.settings_form import SettingsForm
from poslink_demo.exceptions import InvalidSettingError, TransportError

router = APIRouter(tags=["settings"])


class SettingsUpdate(BaseModel):
    """Raw field text as typed into the Comm Setting dialog.

    Omitted fields keep their current value.
    """
    kind: str | None = None
    host: str | None = None
    port: str | None = None
    serial_port: str | None = None
    baud_rate: str | None = None
    timeout: str | None = None


@router.get("/settings", response_model=ConnectionParameters)
async def get_settings(store: ParameterStore = Depends(get_store)) -> ConnectionParameters:
    """Get the current connection parameters."""
    return store.snapshot()


@router.put("/settings", response_model=ConnectionParameters)
async def put_settings(
    body: SettingsUpdate,
    store: ParameterStore = Depends(get_store),
) -> ConnectionParameters:
    """Apply settings the same way the dialog's OK button does."""
    form = SettingsForm.from_parameters(store.snapshot())
    for name, value in body.model_dump(exclude_none=True).items():
        setattr(form, name, value)
    try:
        return form.apply(store)
    except InvalidSettingError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc


@router.get("/settings/communication")
async def get_communication_setting(store: ParameterStore = Depends(get_store)) -> dict:
    """Get the transport-specific setting derived from the current parameters."""
    try:
        return store.communication_setting().to_dict()
    except TransportError as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc
