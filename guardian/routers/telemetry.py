# guardian/routers/telemetry.py
"""Device-originated telemetry: ingestion and raw history.

History reads include events stamped exactly at `end`.
"""
from datetime import datetime
from typing import List

from fastapi import APIRouter, Depends

from guardian.deps import get_telemetry_store, require_device
from guardian.schemas.common import to_naive_utc
from guardian.schemas.telemetry import (
    LocationPingCreate, LocationPingOut,
    AppUsageCreate, AppUsageOut,
    CallRecordCreate, CallRecordOut,
    SmsRecordCreate, SmsRecordOut,
)
from guardian.services.errors import InvalidWindow
from guardian.stores.telemetry import TelemetryStore

router = APIRouter()


def _window(start: datetime, end: datetime):
    start, end = to_naive_utc(start), to_naive_utc(end)
    if start > end:
        raise InvalidWindow(start, end)
    return start, end


# --- LOCATION ---
@router.post("/{device_id}/locations", response_model=LocationPingOut, status_code=201)
def track_location(
    payload: LocationPingCreate,
    device_id: int = Depends(require_device),
    store: TelemetryStore = Depends(get_telemetry_store),
):
    return store.add_location(device_id, payload)


@router.get("/{device_id}/locations", response_model=List[LocationPingOut])
def location_history(
    start: datetime,
    end: datetime,
    device_id: int = Depends(require_device),
    store: TelemetryStore = Depends(get_telemetry_store),
):
    return store.query_locations(device_id, *_window(start, end), inclusive_end=True)


# --- APP USAGE ---
@router.post("/{device_id}/app-usage", response_model=AppUsageOut, status_code=201)
def log_app_usage(
    payload: AppUsageCreate,
    device_id: int = Depends(require_device),
    store: TelemetryStore = Depends(get_telemetry_store),
):
    return store.add_app_usage(device_id, payload)


@router.get("/{device_id}/app-usage", response_model=List[AppUsageOut])
def app_usage_history(
    start: datetime,
    end: datetime,
    device_id: int = Depends(require_device),
    store: TelemetryStore = Depends(get_telemetry_store),
):
    return store.query_app_usage(device_id, *_window(start, end), inclusive_end=True)


# --- CALLS ---
@router.post("/{device_id}/calls", response_model=CallRecordOut, status_code=201)
def log_call(
    payload: CallRecordCreate,
    device_id: int = Depends(require_device),
    store: TelemetryStore = Depends(get_telemetry_store),
):
    return store.add_call(device_id, payload)


@router.get("/{device_id}/calls", response_model=List[CallRecordOut])
def call_history(
    start: datetime,
    end: datetime,
    device_id: int = Depends(require_device),
    store: TelemetryStore = Depends(get_telemetry_store),
):
    return store.query_calls(device_id, *_window(start, end), inclusive_end=True)


# --- SMS ---
@router.post("/{device_id}/sms", response_model=SmsRecordOut, status_code=201)
def log_sms(
    payload: SmsRecordCreate,
    device_id: int = Depends(require_device),
    store: TelemetryStore = Depends(get_telemetry_store),
):
    return store.add_sms(device_id, payload)


@router.get("/{device_id}/sms", response_model=List[SmsRecordOut])
def sms_history(
    start: datetime,
    end: datetime,
    device_id: int = Depends(require_device),
    store: TelemetryStore = Depends(get_telemetry_store),
):
    return store.query_sms(device_id, *_window(start, end), inclusive_end=True)
