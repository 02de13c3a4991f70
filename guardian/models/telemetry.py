# guardian/models/telemetry.py
from datetime import datetime

from sqlalchemy import (
    Column, Text, DateTime, ForeignKey,
    Integer, Boolean, Numeric, Index
)

from guardian.db import Base
from guardian.models.core import enum_column
from guardian.models.enums import CallDirection, SmsDirection, AlertCategory

# Telemetry rows only carry metadata. No column may hold message or call content.


class LocationPing(Base):
    __tablename__ = "location_pings"
    id = Column(Integer, primary_key=True, autoincrement=True)
    device_id = Column(Integer, ForeignKey("devices.id"), nullable=False)
    latitude = Column(Numeric(10, 8), nullable=False)
    longitude = Column(Numeric(11, 8), nullable=False)
    accuracy = Column(Numeric(8, 2))
    address = Column(Text)
    timestamp = Column(DateTime, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    __table_args__ = (Index("ix_location_pings_device_ts", "device_id", "timestamp"),)


class AppUsageSession(Base):
    __tablename__ = "app_usage_sessions"
    id = Column(Integer, primary_key=True, autoincrement=True)
    device_id = Column(Integer, ForeignKey("devices.id"), nullable=False)
    app_name = Column(Text, nullable=False)
    package_name = Column(Text, nullable=False)
    usage_duration = Column(Integer, nullable=False)  # seconds
    start_time = Column(DateTime, nullable=False)
    end_time = Column(DateTime)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    __table_args__ = (Index("ix_app_usage_device_start", "device_id", "start_time"),)


class CallRecord(Base):
    __tablename__ = "call_records"
    id = Column(Integer, primary_key=True, autoincrement=True)
    device_id = Column(Integer, ForeignKey("devices.id"), nullable=False)
    phone_number = Column(Text, nullable=False)
    contact_name = Column(Text)
    direction = Column(enum_column(CallDirection, "call_direction"), nullable=False)
    duration = Column(Integer, nullable=False)  # seconds, 0 for missed
    timestamp = Column(DateTime, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    __table_args__ = (Index("ix_call_records_device_ts", "device_id", "timestamp"),)


class SmsRecord(Base):
    __tablename__ = "sms_records"
    id = Column(Integer, primary_key=True, autoincrement=True)
    device_id = Column(Integer, ForeignKey("devices.id"), nullable=False)
    phone_number = Column(Text, nullable=False)
    contact_name = Column(Text)
    direction = Column(enum_column(SmsDirection, "sms_direction"), nullable=False)
    message_length = Column(Integer, nullable=False)  # character count only
    timestamp = Column(DateTime, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    __table_args__ = (Index("ix_sms_records_device_ts", "device_id", "timestamp"),)


class EmergencyAlert(Base):
    __tablename__ = "emergency_alerts"
    id = Column(Integer, primary_key=True, autoincrement=True)
    device_id = Column(Integer, ForeignKey("devices.id"), nullable=False)
    category = Column(enum_column(AlertCategory, "alert_category"), nullable=False)
    message = Column(Text, nullable=False)
    latitude = Column(Numeric(10, 8))
    longitude = Column(Numeric(11, 8))
    is_resolved = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    resolved_at = Column(DateTime)
