# guardian/models/enums.py
import enum


class UserRole(str, enum.Enum):
    parent = "parent"
    child = "child"


class DeviceType(str, enum.Enum):
    android = "android"
    ios = "ios"


class CallDirection(str, enum.Enum):
    incoming = "incoming"
    outgoing = "outgoing"
    missed = "missed"


class SmsDirection(str, enum.Enum):
    received = "received"
    sent = "sent"


class AlertCategory(str, enum.Enum):
    panic_button = "panic_button"
    location_alert = "location_alert"
    app_alert = "app_alert"
    custom = "custom"
