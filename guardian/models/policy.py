# guardian/models/policy.py
from datetime import datetime

from sqlalchemy import Column, DateTime, Integer, Boolean, ForeignKey

from guardian.db import Base
from guardian.models.core import JsonColumn


class ScreenTimeLimit(Base):
    __tablename__ = "screen_time_limits"
    id = Column(Integer, primary_key=True, autoincrement=True)
    device_id = Column(Integer, ForeignKey("devices.id"), nullable=False)
    daily_limit = Column(Integer, nullable=False)  # minutes
    app_specific_limits = Column(JsonColumn)  # {package_name: minutes}
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, nullable=False)


class WebFilter(Base):
    __tablename__ = "web_filters"
    id = Column(Integer, primary_key=True, autoincrement=True)
    device_id = Column(Integer, ForeignKey("devices.id"), nullable=False)
    blocked_domains = Column(JsonColumn, nullable=False, default=list)
    blocked_categories = Column(JsonColumn, nullable=False, default=list)
    allowed_domains = Column(JsonColumn, nullable=False, default=list)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, nullable=False)
