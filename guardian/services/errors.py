# guardian/services/errors.py
from datetime import datetime


class GuardianError(Exception):
    """Base class for domain errors raised by stores and services."""


class InvalidWindow(GuardianError, ValueError):
    def __init__(self, start: datetime, end: datetime):
        self.start = start
        self.end = end
        super().__init__(f"Invalid window: start {start.isoformat()} is after end {end.isoformat()}")


class DeviceNotFound(GuardianError, LookupError):
    def __init__(self, device_id: int):
        self.device_id = device_id
        super().__init__(f"Device with id {device_id} not found")


class UserNotFound(GuardianError, LookupError):
    def __init__(self, user_id: int):
        self.user_id = user_id
        super().__init__(f"User with id {user_id} not found")


class AlertNotFound(GuardianError, LookupError):
    def __init__(self, alert_id: int):
        self.alert_id = alert_id
        super().__init__(f"Emergency alert with id {alert_id} not found")


class WebFilterNotFound(GuardianError, LookupError):
    def __init__(self, filter_id: int):
        self.filter_id = filter_id
        super().__init__(f"Web filter with id {filter_id} not found")


class DuplicateDevice(GuardianError):
    def __init__(self, external_id: str):
        self.external_id = external_id
        super().__init__(f"Device identifier {external_id!r} is already registered")


class StoreUnavailable(GuardianError):
    """A backing store read or write failed. Never retried here."""


class DuplicateUser(GuardianError):
    def __init__(self, email: str):
        self.email = email
        super().__init__(f"User with email {email!r} already exists")


class RoleMismatch(GuardianError):
    def __init__(self, user_id: int, expected: str):
        self.user_id = user_id
        self.expected = expected
        super().__init__(f"User with id {user_id} does not have role {expected!r}")


class DuplicateRelationship(GuardianError):
    def __init__(self, parent_id: int, child_id: int):
        self.parent_id = parent_id
        self.child_id = child_id
        super().__init__(f"User {child_id} is already linked to parent {parent_id}")
