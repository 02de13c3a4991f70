# guardian/models/core.py
from datetime import datetime

from sqlalchemy import (
    Column, String, Text, DateTime, ForeignKey,
    Integer, Boolean, Enum, UniqueConstraint
)
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.types import JSON
from sqlalchemy.orm import relationship

from guardian.db import Base
from guardian.models.enums import UserRole, DeviceType

# JSONB on PostgreSQL, plain JSON elsewhere (tests run on SQLite)
JsonColumn = JSON().with_variant(JSONB(), "postgresql")


def enum_column(enum_cls, name: str) -> Enum:
    return Enum(
        enum_cls,
        name=name,
        values_callable=lambda members: [m.value for m in members],
    )


class User(Base):
    __tablename__ = "users"
    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(Text, unique=True, nullable=False)
    full_name = Column(Text, nullable=False)
    role = Column(enum_column(UserRole, "user_role"), nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)


class Device(Base):
    __tablename__ = "devices"
    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    device_name = Column(Text, nullable=False)
    device_type = Column(enum_column(DeviceType, "device_type"), nullable=False)
    # External identifier reported by the phone, not the row id
    device_id = Column(String, unique=True, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
    last_seen = Column(DateTime)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    user = relationship("User", backref="devices")


class FamilyRelationship(Base):
    __tablename__ = "family_relationships"
    id = Column(Integer, primary_key=True, autoincrement=True)
    parent_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    child_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    __table_args__ = (UniqueConstraint("parent_id", "child_id", name="uq_family_parent_child"),)
