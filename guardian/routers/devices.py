# guardian/routers/devices.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from guardian.deps import get_device_store, get_relationship_store, get_user_store
from guardian.schemas.device import (
    UserCreate, UserOut, DeviceCreate, DeviceOut, RelationshipCreate, RelationshipOut,
)
from guardian.stores.devices import DeviceStore, RelationshipStore, UserStore

router = APIRouter()


@router.post("/users", response_model=UserOut, status_code=201)
def create_user(payload: UserCreate, users: UserStore = Depends(get_user_store)):
    return users.create(payload)


@router.get("/users/{user_id}/devices", response_model=List[DeviceOut])
def list_user_devices(user_id: int, devices: DeviceStore = Depends(get_device_store)):
    return devices.list_for_user(user_id)


# --- FAMILY ---
@router.post("/relationships", response_model=RelationshipOut, status_code=201)
def link_parent_child(
    payload: RelationshipCreate,
    relationships: RelationshipStore = Depends(get_relationship_store),
):
    """Link a parent account to a child account."""
    return relationships.link(payload)


@router.get("/users/{parent_id}/children", response_model=List[UserOut])
def list_children(
    parent_id: int,
    relationships: RelationshipStore = Depends(get_relationship_store),
):
    return relationships.children_of(parent_id)


# --- DEVICES ---
@router.post("/devices", response_model=DeviceOut, status_code=201)
def register_device(payload: DeviceCreate, devices: DeviceStore = Depends(get_device_store)):
    return devices.create(payload)


@router.get("/devices/{device_id}", response_model=DeviceOut)
def get_device(device_id: int, devices: DeviceStore = Depends(get_device_store)):
    device = devices.get(device_id)
    if device is None:
        raise HTTPException(status_code=404, detail=f"Device with id {device_id} not found")
    return device
