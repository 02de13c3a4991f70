# guardian/stores/devices.py
from typing import List, Optional

from sqlalchemy.exc import IntegrityError

from guardian.models.core import User, Device, FamilyRelationship
from guardian.models.enums import UserRole
from guardian.schemas.device import (
    UserCreate, UserOut, DeviceCreate, DeviceOut, RelationshipCreate, RelationshipOut,
)
from guardian.services.errors import (
    UserNotFound, DuplicateDevice, DuplicateUser, DuplicateRelationship, RoleMismatch,
)
from guardian.stores.base import SessionStore, store_call


class UserStore(SessionStore):
    def create(self, payload: UserCreate) -> UserOut:
        with store_call(self.db, "user.create"):
            if self.db.query(User.id).filter(User.email == payload.email).first():
                raise DuplicateUser(payload.email)

            user = User(email=payload.email, full_name=payload.full_name, role=payload.role)
            self.db.add(user)
            try:
                self.db.commit()
            except IntegrityError:
                # Same email registered concurrently
                self.db.rollback()
                raise DuplicateUser(payload.email)
            self.db.refresh(user)
            return UserOut.model_validate(user)

    def exists(self, user_id: int) -> bool:
        with store_call(self.db, "user.exists"):
            return self.db.query(User.id).filter(User.id == user_id).first() is not None


class DeviceStore(SessionStore):
    def exists(self, device_id: int) -> bool:
        with store_call(self.db, "device.exists"):
            return self.db.query(Device.id).filter(Device.id == device_id).first() is not None

    def get(self, device_id: int) -> Optional[DeviceOut]:
        with store_call(self.db, "device.get"):
            device = self.db.query(Device).filter(Device.id == device_id).first()
            return DeviceOut.model_validate(device) if device else None

    def list_for_user(self, user_id: int) -> List[DeviceOut]:
        with store_call(self.db, "device.list_for_user"):
            rows = (
                self.db.query(Device)
                .filter(Device.user_id == user_id)
                .order_by(Device.created_at, Device.id)
                .all()
            )
            return [DeviceOut.model_validate(r) for r in rows]

    def create(self, payload: DeviceCreate) -> DeviceOut:
        with store_call(self.db, "device.create"):
            if self.db.query(User.id).filter(User.id == payload.user_id).first() is None:
                raise UserNotFound(payload.user_id)

            taken = self.db.query(Device.id).filter(Device.device_id == payload.device_id).first()
            if taken:
                raise DuplicateDevice(payload.device_id)

            device = Device(
                user_id=payload.user_id,
                device_name=payload.device_name,
                device_type=payload.device_type,
                device_id=payload.device_id,
            )
            self.db.add(device)
            try:
                self.db.commit()
            except IntegrityError:
                # Lost a race with a concurrent registration of the same id
                self.db.rollback()
                raise DuplicateDevice(payload.device_id)
            self.db.refresh(device)
            return DeviceOut.model_validate(device)


class RelationshipStore(SessionStore):
    """Parent/child links between user accounts."""

    def _user_with_role(self, user_id: int, role: UserRole) -> User:
        user = self.db.query(User).filter(User.id == user_id).first()
        if user is None:
            raise UserNotFound(user_id)
        if user.role != role:
            raise RoleMismatch(user_id, role.value)
        return user

    def link(self, payload: RelationshipCreate) -> RelationshipOut:
        with store_call(self.db, "relationship.link"):
            self._user_with_role(payload.parent_id, UserRole.parent)
            self._user_with_role(payload.child_id, UserRole.child)

            existing = self.db.query(FamilyRelationship.id).filter(
                FamilyRelationship.parent_id == payload.parent_id,
                FamilyRelationship.child_id == payload.child_id,
            ).first()
            if existing:
                raise DuplicateRelationship(payload.parent_id, payload.child_id)

            link = FamilyRelationship(parent_id=payload.parent_id, child_id=payload.child_id)
            self.db.add(link)
            try:
                self.db.commit()
            except IntegrityError:
                self.db.rollback()
                raise DuplicateRelationship(payload.parent_id, payload.child_id)
            self.db.refresh(link)
            return RelationshipOut.model_validate(link)

    def children_of(self, parent_id: int) -> List[UserOut]:
        with store_call(self.db, "relationship.children_of"):
            rows = (
                self.db.query(User)
                .join(FamilyRelationship, FamilyRelationship.child_id == User.id)
                .filter(FamilyRelationship.parent_id == parent_id)
                .order_by(FamilyRelationship.created_at, FamilyRelationship.id)
                .all()
            )
            return [UserOut.model_validate(r) for r in rows]
