# guardian/routers/policy.py
from typing import List

from fastapi import APIRouter, Depends

from guardian.deps import get_config_store, require_device
from guardian.schemas.policy import (
    ScreenTimeLimitCreate, ScreenTimeLimitOut,
    WebFilterCreate, WebFilterOut, WebFilterActiveRequest,
)
from guardian.stores.config import ConfigStore

router = APIRouter()


# --- SCREEN TIME ---
@router.post("/{device_id}/screen-time", response_model=ScreenTimeLimitOut, status_code=201)
def set_screen_time_limit(
    payload: ScreenTimeLimitCreate,
    device_id: int = Depends(require_device),
    store: ConfigStore = Depends(get_config_store),
):
    return store.add_screen_time_limit(device_id, payload)


@router.get("/{device_id}/screen-time", response_model=List[ScreenTimeLimitOut])
def get_screen_time_limits(
    device_id: int = Depends(require_device),
    store: ConfigStore = Depends(get_config_store),
):
    return store.screen_time_limits(device_id)


# --- WEB FILTERS ---
@router.post("/{device_id}/web-filters", response_model=WebFilterOut, status_code=201)
def set_web_filter(
    payload: WebFilterCreate,
    device_id: int = Depends(require_device),
    store: ConfigStore = Depends(get_config_store),
):
    return store.add_web_filter(device_id, payload)


@router.get("/{device_id}/web-filters", response_model=List[WebFilterOut])
def get_web_filters(
    device_id: int = Depends(require_device),
    store: ConfigStore = Depends(get_config_store),
):
    return store.web_filters(device_id)


@router.put("/web-filters/{filter_id}/active", response_model=WebFilterOut)
def toggle_web_filter(
    filter_id: int,
    payload: WebFilterActiveRequest,
    store: ConfigStore = Depends(get_config_store),
):
    """Turn a filter rule set on or off without deleting it."""
    return store.set_web_filter_active(filter_id, payload.is_active)
