# guardian/schemas/telemetry.py
"""
Telemetry shapes.

`*Create` models are the write boundary: every rule the aggregation code
relies on (non-negative durations, missed calls without talk time,
coordinate ranges) is enforced here. None of them carries message or
call content; SMS records keep the character count only. Unknown fields
are rejected, so a client cannot slip a body or transcript through.
"""
from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from guardian.models.enums import CallDirection, SmsDirection, AlertCategory
from guardian.schemas.common import UtcDatetime, Latitude, Longitude, Accuracy


# --- LOCATION ---
class LocationPingCreate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    # Rounded to the stored scale; phones report more digits than we keep
    latitude: Latitude
    longitude: Longitude
    accuracy: Optional[Accuracy] = None
    address: Optional[str] = None
    # Omitted -> server capture time
    timestamp: Optional[UtcDatetime] = None


class LocationPingOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    device_id: int
    latitude: Decimal
    longitude: Decimal
    accuracy: Optional[Decimal] = None
    address: Optional[str] = None
    timestamp: datetime
    created_at: datetime


# --- APP USAGE ---
class AppUsageCreate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    app_name: str
    package_name: str
    usage_duration: int = Field(ge=0)
    start_time: UtcDatetime
    end_time: Optional[UtcDatetime] = None

    @model_validator(mode="after")
    def _end_after_start(self):
        if self.end_time is not None and self.end_time < self.start_time:
            raise ValueError("end_time must not be before start_time")
        return self


class AppUsageOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    device_id: int
    app_name: str
    package_name: str
    usage_duration: int
    start_time: datetime
    end_time: Optional[datetime] = None
    created_at: datetime


# --- CALLS ---
class CallRecordCreate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    phone_number: str
    contact_name: Optional[str] = None
    direction: CallDirection
    duration: int = Field(ge=0)
    timestamp: UtcDatetime

    @model_validator(mode="after")
    def _missed_has_no_duration(self):
        if self.direction == CallDirection.missed and self.duration != 0:
            raise ValueError("missed calls must report duration 0")
        return self


class CallRecordOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    device_id: int
    phone_number: str
    contact_name: Optional[str] = None
    direction: CallDirection
    duration: int
    timestamp: datetime
    created_at: datetime


# --- SMS ---
class SmsRecordCreate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    phone_number: str
    contact_name: Optional[str] = None
    direction: SmsDirection
    message_length: int = Field(ge=0)
    timestamp: UtcDatetime


class SmsRecordOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    device_id: int
    phone_number: str
    contact_name: Optional[str] = None
    direction: SmsDirection
    message_length: int
    timestamp: datetime
    created_at: datetime


# --- EMERGENCY ALERTS ---
class EmergencyAlertCreate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    category: AlertCategory
    message: str
    latitude: Optional[Latitude] = None
    longitude: Optional[Longitude] = None


class EmergencyAlertOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    device_id: int
    category: AlertCategory
    message: str
    latitude: Optional[Decimal] = None
    longitude: Optional[Decimal] = None
    is_resolved: bool
    created_at: datetime
    resolved_at: Optional[datetime] = None
