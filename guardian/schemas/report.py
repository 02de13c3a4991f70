# guardian/schemas/report.py
from datetime import datetime
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class AppUsageRank(BaseModel):
    model_config = ConfigDict(from_attributes=True, frozen=True)

    app_name: str
    usage_time: int = Field(ge=0)


class ActivityReport(BaseModel):
    """A persisted report as handed back to callers."""
    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: int
    device_id: int
    report_date: datetime
    total_screen_time: int = Field(ge=0)
    most_used_apps: List[AppUsageRank] = Field(default_factory=list, max_length=10)
    locations_visited: int = Field(ge=0)
    calls_made: int = Field(ge=0)
    sms_sent: int = Field(ge=0)
    websites_blocked: int = Field(ge=0)
    created_at: datetime


class ReportDraft(BaseModel):
    """Assembled metrics for one device/window, before the store assigns identity."""
    model_config = ConfigDict(frozen=True)

    device_id: int
    report_date: datetime
    total_screen_time: int = Field(ge=0)
    most_used_apps: List[AppUsageRank] = Field(default_factory=list, max_length=10)
    locations_visited: int = Field(ge=0)
    calls_made: int = Field(ge=0)
    sms_sent: int = Field(ge=0)
    websites_blocked: int = Field(ge=0)
