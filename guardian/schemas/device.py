# guardian/schemas/device.py
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from guardian.models.enums import UserRole, DeviceType


class UserCreate(BaseModel):
    email: str = Field(min_length=3)
    full_name: str
    role: UserRole


class UserOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    full_name: str
    role: UserRole
    created_at: datetime


class DeviceCreate(BaseModel):
    user_id: int
    device_name: str
    device_type: DeviceType
    device_id: str = Field(min_length=1)


class DeviceOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    device_name: str
    device_type: DeviceType
    device_id: str
    is_active: bool
    last_seen: Optional[datetime] = None
    created_at: datetime


class RelationshipCreate(BaseModel):
    parent_id: int
    child_id: int


class RelationshipOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    parent_id: int
    child_id: int
    created_at: datetime
