# guardian/deps.py
"""FastAPI dependencies: stores and services bound to the request session."""
from fastapi import Depends, HTTPException
from sqlalchemy.orm import Session

from guardian.config import settings
from guardian.db import get_db
from guardian.services.report_builder import ReportBuilder
from guardian.stores.alerts import AlertStore
from guardian.stores.config import ConfigStore
from guardian.stores.devices import DeviceStore, RelationshipStore, UserStore
from guardian.stores.reports import ReportStore
from guardian.stores.telemetry import TelemetryStore


def get_user_store(db: Session = Depends(get_db)) -> UserStore:
    return UserStore(db)


def get_relationship_store(db: Session = Depends(get_db)) -> RelationshipStore:
    return RelationshipStore(db)


def get_device_store(db: Session = Depends(get_db)) -> DeviceStore:
    return DeviceStore(db)


def get_telemetry_store(db: Session = Depends(get_db)) -> TelemetryStore:
    return TelemetryStore(db)


def get_config_store(db: Session = Depends(get_db)) -> ConfigStore:
    return ConfigStore(db)


def get_alert_store(db: Session = Depends(get_db)) -> AlertStore:
    return AlertStore(db)


def get_report_builder(db: Session = Depends(get_db)) -> ReportBuilder:
    return ReportBuilder(
        devices=DeviceStore(db),
        telemetry=TelemetryStore(db),
        config=ConfigStore(db),
        reports=ReportStore(db),
        strict_device_check=settings.strict_device_check,
    )


def require_device(device_id: int, devices: DeviceStore = Depends(get_device_store)) -> int:
    """Path guard for device-scoped writes and reads."""
    if not devices.exists(device_id):
        raise HTTPException(status_code=404, detail=f"Device with id {device_id} not found")
    return device_id
