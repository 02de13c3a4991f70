# guardian/stores/telemetry.py
"""
Telemetry store: single-row ingestion and windowed range reads.

Range reads use the half-open window [start, end) by default, which is
what report aggregation needs. The raw history views pass
`inclusive_end=True` so an event stamped exactly at `end` is still shown.
App usage is matched on the session's start_time only, so a session
that begins inside the window counts in full even if it runs past `end`. Results come back in
ascending event-time order (ties by id), which is the scan order the
report aggregators rely on.
"""
from datetime import datetime
from typing import List

from guardian.models.telemetry import LocationPing, AppUsageSession, CallRecord, SmsRecord
from guardian.schemas.telemetry import (
    LocationPingCreate, LocationPingOut,
    AppUsageCreate, AppUsageOut,
    CallRecordCreate, CallRecordOut,
    SmsRecordCreate, SmsRecordOut,
)
from guardian.stores.base import SessionStore, store_call


def _upper_bound(column, end: datetime, inclusive: bool):
    return column <= end if inclusive else column < end


class TelemetryStore(SessionStore):

    # --- WRITES ---
    def _insert(self, row, operation: str):
        with store_call(self.db, operation):
            self.db.add(row)
            self.db.commit()
            self.db.refresh(row)
            return row

    def add_location(self, device_id: int, payload: LocationPingCreate) -> LocationPingOut:
        row = LocationPing(
            device_id=device_id,
            latitude=payload.latitude,
            longitude=payload.longitude,
            accuracy=payload.accuracy,
            address=payload.address,
            timestamp=payload.timestamp or datetime.utcnow(),
        )
        return LocationPingOut.model_validate(self._insert(row, "telemetry.add_location"))

    def add_app_usage(self, device_id: int, payload: AppUsageCreate) -> AppUsageOut:
        row = AppUsageSession(
            device_id=device_id,
            app_name=payload.app_name,
            package_name=payload.package_name,
            usage_duration=payload.usage_duration,
            start_time=payload.start_time,
            end_time=payload.end_time,
        )
        return AppUsageOut.model_validate(self._insert(row, "telemetry.add_app_usage"))

    def add_call(self, device_id: int, payload: CallRecordCreate) -> CallRecordOut:
        row = CallRecord(
            device_id=device_id,
            phone_number=payload.phone_number,
            contact_name=payload.contact_name,
            direction=payload.direction,
            duration=payload.duration,
            timestamp=payload.timestamp,
        )
        return CallRecordOut.model_validate(self._insert(row, "telemetry.add_call"))

    def add_sms(self, device_id: int, payload: SmsRecordCreate) -> SmsRecordOut:
        row = SmsRecord(
            device_id=device_id,
            phone_number=payload.phone_number,
            contact_name=payload.contact_name,
            direction=payload.direction,
            message_length=payload.message_length,
            timestamp=payload.timestamp,
        )
        return SmsRecordOut.model_validate(self._insert(row, "telemetry.add_sms"))

    # --- WINDOWED READS ---
    def query_app_usage(
        self, device_id: int, start: datetime, end: datetime, inclusive_end: bool = False
    ) -> List[AppUsageOut]:
        with store_call(self.db, "telemetry.query_app_usage"):
            rows = (
                self.db.query(AppUsageSession)
                .filter(
                    AppUsageSession.device_id == device_id,
                    AppUsageSession.start_time >= start,
                    _upper_bound(AppUsageSession.start_time, end, inclusive_end),
                )
                .order_by(AppUsageSession.start_time, AppUsageSession.id)
                .all()
            )
            return [AppUsageOut.model_validate(r) for r in rows]

    def query_locations(
        self, device_id: int, start: datetime, end: datetime, inclusive_end: bool = False
    ) -> List[LocationPingOut]:
        with store_call(self.db, "telemetry.query_locations"):
            rows = (
                self.db.query(LocationPing)
                .filter(
                    LocationPing.device_id == device_id,
                    LocationPing.timestamp >= start,
                    _upper_bound(LocationPing.timestamp, end, inclusive_end),
                )
                .order_by(LocationPing.timestamp, LocationPing.id)
                .all()
            )
            return [LocationPingOut.model_validate(r) for r in rows]

    def query_calls(
        self, device_id: int, start: datetime, end: datetime, inclusive_end: bool = False
    ) -> List[CallRecordOut]:
        with store_call(self.db, "telemetry.query_calls"):
            rows = (
                self.db.query(CallRecord)
                .filter(
                    CallRecord.device_id == device_id,
                    CallRecord.timestamp >= start,
                    _upper_bound(CallRecord.timestamp, end, inclusive_end),
                )
                .order_by(CallRecord.timestamp, CallRecord.id)
                .all()
            )
            return [CallRecordOut.model_validate(r) for r in rows]

    def query_sms(
        self, device_id: int, start: datetime, end: datetime, inclusive_end: bool = False
    ) -> List[SmsRecordOut]:
        with store_call(self.db, "telemetry.query_sms"):
            rows = (
                self.db.query(SmsRecord)
                .filter(
                    SmsRecord.device_id == device_id,
                    SmsRecord.timestamp >= start,
                    _upper_bound(SmsRecord.timestamp, end, inclusive_end),
                )
                .order_by(SmsRecord.timestamp, SmsRecord.id)
                .all()
            )
            return [SmsRecordOut.model_validate(r) for r in rows]
