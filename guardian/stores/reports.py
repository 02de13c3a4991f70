# guardian/stores/reports.py
from datetime import datetime
from typing import List

from guardian.models.report import ActivityReport, ActivityReportApp
from guardian.schemas.report import ActivityReport as ActivityReportOut, ReportDraft
from guardian.stores.base import SessionStore, store_call


class ReportStore(SessionStore):
    """Owns report identity. Reports are insert-only; there is no update path."""

    def save(self, draft: ReportDraft) -> ActivityReportOut:
        # Report row and its ranked apps go in one commit: all or nothing.
        with store_call(self.db, "report.save"):
            row = ActivityReport(
                device_id=draft.device_id,
                report_date=draft.report_date,
                total_screen_time=draft.total_screen_time,
                locations_visited=draft.locations_visited,
                calls_made=draft.calls_made,
                sms_sent=draft.sms_sent,
                websites_blocked=draft.websites_blocked,
                created_at=datetime.utcnow(),
            )
            row.most_used_apps = [
                ActivityReportApp(rank=rank, app_name=app.app_name, usage_time=app.usage_time)
                for rank, app in enumerate(draft.most_used_apps, start=1)
            ]
            self.db.add(row)
            self.db.commit()
            self.db.refresh(row)
            return ActivityReportOut.model_validate(row)

    def query(self, device_id: int, start: datetime, end: datetime) -> List[ActivityReportOut]:
        """Reports whose report_date is in [start, end], newest window first."""
        with store_call(self.db, "report.query"):
            rows = (
                self.db.query(ActivityReport)
                .filter(
                    ActivityReport.device_id == device_id,
                    ActivityReport.report_date >= start,
                    ActivityReport.report_date <= end,
                )
                .order_by(ActivityReport.report_date.desc(), ActivityReport.id.desc())
                .all()
            )
            return [ActivityReportOut.model_validate(r) for r in rows]
