# guardian/routers/alerts.py
from typing import List

from fastapi import APIRouter, Depends

from guardian.deps import get_alert_store, require_device
from guardian.schemas.telemetry import EmergencyAlertCreate, EmergencyAlertOut
from guardian.stores.alerts import AlertStore

router = APIRouter()


@router.post("/resolve/{alert_id}", response_model=EmergencyAlertOut)
def resolve_alert(alert_id: int, store: AlertStore = Depends(get_alert_store)):
    """Parent acknowledges an alert. Idempotent."""
    return store.resolve(alert_id)


@router.post("/{device_id}", response_model=EmergencyAlertOut, status_code=201)
def raise_alert(
    payload: EmergencyAlertCreate,
    device_id: int = Depends(require_device),
    store: AlertStore = Depends(get_alert_store),
):
    return store.create(device_id, payload)


@router.get("/{device_id}", response_model=List[EmergencyAlertOut])
def list_alerts(
    unresolved: bool = False,
    device_id: int = Depends(require_device),
    store: AlertStore = Depends(get_alert_store),
):
    return store.list_for_device(device_id, unresolved_only=unresolved)
