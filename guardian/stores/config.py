# guardian/stores/config.py
from datetime import datetime
from typing import List

from guardian.models.policy import ScreenTimeLimit, WebFilter
from guardian.schemas.policy import (
    ScreenTimeLimitCreate, ScreenTimeLimitOut,
    WebFilterCreate, WebFilterOut,
)
from guardian.services.errors import WebFilterNotFound
from guardian.stores.base import SessionStore, store_call


class ConfigStore(SessionStore):
    """Screen-time limits and web-filter rule sets, per device."""

    def add_screen_time_limit(self, device_id: int, payload: ScreenTimeLimitCreate) -> ScreenTimeLimitOut:
        with store_call(self.db, "config.add_screen_time_limit"):
            row = ScreenTimeLimit(
                device_id=device_id,
                daily_limit=payload.daily_limit,
                app_specific_limits=payload.app_specific_limits,
            )
            self.db.add(row)
            self.db.commit()
            self.db.refresh(row)
            return ScreenTimeLimitOut.model_validate(row)

    def screen_time_limits(self, device_id: int) -> List[ScreenTimeLimitOut]:
        with store_call(self.db, "config.screen_time_limits"):
            rows = (
                self.db.query(ScreenTimeLimit)
                .filter(ScreenTimeLimit.device_id == device_id)
                .order_by(ScreenTimeLimit.created_at.desc(), ScreenTimeLimit.id.desc())
                .all()
            )
            return [ScreenTimeLimitOut.model_validate(r) for r in rows]

    def add_web_filter(self, device_id: int, payload: WebFilterCreate) -> WebFilterOut:
        with store_call(self.db, "config.add_web_filter"):
            row = WebFilter(
                device_id=device_id,
                blocked_domains=list(payload.blocked_domains),
                blocked_categories=list(payload.blocked_categories),
                allowed_domains=list(payload.allowed_domains),
            )
            self.db.add(row)
            self.db.commit()
            self.db.refresh(row)
            return WebFilterOut.model_validate(row)

    def web_filters(self, device_id: int) -> List[WebFilterOut]:
        with store_call(self.db, "config.web_filters"):
            rows = (
                self.db.query(WebFilter)
                .filter(WebFilter.device_id == device_id)
                .order_by(WebFilter.created_at.desc(), WebFilter.id.desc())
                .all()
            )
            return [WebFilterOut.model_validate(r) for r in rows]

    def active_web_filters(self, device_id: int) -> List[WebFilterOut]:
        with store_call(self.db, "config.active_web_filters"):
            rows = (
                self.db.query(WebFilter)
                .filter(WebFilter.device_id == device_id, WebFilter.is_active == True)  # noqa: E712
                .order_by(WebFilter.id)
                .all()
            )
            return [WebFilterOut.model_validate(r) for r in rows]

    def set_web_filter_active(self, filter_id: int, is_active: bool) -> WebFilterOut:
        with store_call(self.db, "config.set_web_filter_active"):
            row = self.db.query(WebFilter).filter(WebFilter.id == filter_id).first()
            if row is None:
                raise WebFilterNotFound(filter_id)
            row.is_active = is_active
            row.updated_at = datetime.utcnow()
            self.db.commit()
            self.db.refresh(row)
            return WebFilterOut.model_validate(row)
