# guardian/schemas/policy.py
from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, PositiveInt


class ScreenTimeLimitCreate(BaseModel):
    daily_limit: PositiveInt  # minutes
    app_specific_limits: Optional[Dict[str, PositiveInt]] = None


class ScreenTimeLimitOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    device_id: int
    daily_limit: int
    app_specific_limits: Optional[Dict[str, int]] = None
    is_active: bool
    created_at: datetime
    updated_at: datetime


class WebFilterCreate(BaseModel):
    blocked_domains: List[str] = Field(default_factory=list)
    blocked_categories: List[str] = Field(default_factory=list)
    allowed_domains: List[str] = Field(default_factory=list)


class WebFilterOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    device_id: int
    blocked_domains: List[str]
    blocked_categories: List[str]
    allowed_domains: List[str]
    is_active: bool
    created_at: datetime
    updated_at: datetime


class WebFilterActiveRequest(BaseModel):
    is_active: bool
