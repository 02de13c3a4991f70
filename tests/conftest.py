"""
tests/conftest.py
Shared fixtures: an in-memory SQLite database and an API client bound to it.
"""
import os

os.environ.setdefault("DATABASE_URL", "sqlite://")

from datetime import datetime

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from guardian.db import Base, get_db
from guardian.main import app
from guardian.models.core import User, Device
from guardian.models.enums import UserRole, DeviceType


@pytest.fixture
def engine():
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=eng)
    yield eng
    Base.metadata.drop_all(bind=eng)
    eng.dispose()


@pytest.fixture
def db(engine):
    Session = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = Session()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(db):
    def _get_db():
        yield db

    app.dependency_overrides[get_db] = _get_db
    try:
        with TestClient(app) as c:
            yield c
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def child(db) -> User:
    user = User(email="kid@example.com", full_name="Test Child", role=UserRole.child)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def device(db, child) -> Device:
    dev = Device(
        user_id=child.id,
        device_name="Test Phone",
        device_type=DeviceType.android,
        device_id="ext-device-001",
        created_at=datetime(2024, 1, 1),
    )
    db.add(dev)
    db.commit()
    db.refresh(dev)
    return dev
