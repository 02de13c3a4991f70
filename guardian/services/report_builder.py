# guardian/services/report_builder.py
"""
Activity report generation.

`ReportBuilder` reads each telemetry stream for a device and window,
reduces them with the aggregators, and persists the result as a new
report row. It keeps no state between calls; the stores it is given are
the only way it reaches the database.

Failure policy: any store error aborts the whole call. A metric is never
replaced by a fallback zero, and nothing is written unless every read
succeeded.
"""
import logging
import time as perf_time
from datetime import datetime
from typing import List, Protocol, Sequence

from guardian.schemas.report import ActivityReport, ReportDraft
from guardian.services import aggregators
from guardian.services.errors import InvalidWindow, DeviceNotFound

logger = logging.getLogger(__name__)


class DeviceLookup(Protocol):
    def exists(self, device_id: int) -> bool: ...


class TelemetryReader(Protocol):
    def query_app_usage(self, device_id: int, start: datetime, end: datetime) -> Sequence: ...
    def query_locations(self, device_id: int, start: datetime, end: datetime) -> Sequence: ...
    def query_calls(self, device_id: int, start: datetime, end: datetime) -> Sequence: ...
    def query_sms(self, device_id: int, start: datetime, end: datetime) -> Sequence: ...


class FilterReader(Protocol):
    def active_web_filters(self, device_id: int) -> Sequence: ...


class ReportWriter(Protocol):
    def save(self, draft: ReportDraft) -> ActivityReport: ...
    def query(self, device_id: int, start: datetime, end: datetime) -> List[ActivityReport]: ...


class ReportBuilder:
    def __init__(
        self,
        devices: DeviceLookup,
        telemetry: TelemetryReader,
        config: FilterReader,
        reports: ReportWriter,
        strict_device_check: bool = True,
    ):
        self.devices = devices
        self.telemetry = telemetry
        self.config = config
        self.reports = reports
        self.strict_device_check = strict_device_check

    def generate(self, device_id: int, start: datetime, end: datetime) -> ActivityReport:
        """Aggregate [start, end) for `device_id` and persist a new report.

        Raises InvalidWindow (before any store access) when start > end,
        DeviceNotFound for unknown devices when strict checking is on,
        and StoreUnavailable when any read or the final write fails.
        """
        if start > end:
            raise InvalidWindow(start, end)

        t0 = perf_time.perf_counter()
        logger.info(f"ACTIVITY REPORT step=start device={device_id} start={start.isoformat()} end={end.isoformat()}")

        if self.strict_device_check and not self.devices.exists(device_id):
            raise DeviceNotFound(device_id)

        # 1. Windowed streams
        screen = aggregators.summarize_screen_time(self.telemetry.query_app_usage(device_id, start, end))
        locations = aggregators.count_locations(self.telemetry.query_locations(device_id, start, end))
        calls = aggregators.count_outgoing_calls(self.telemetry.query_calls(device_id, start, end))
        sms = aggregators.count_sent_sms(self.telemetry.query_sms(device_id, start, end))

        # 2. Current filter state, independent of the window
        blocked = aggregators.count_blocked_sites(self.config.active_web_filters(device_id))

        logger.debug(
            f"ACTIVITY REPORT step=aggregated device={device_id} total_screen_time={screen.total_screen_time} "
            f"apps={len(screen.most_used_apps)} locations={locations} calls={calls} sms={sms} blocked={blocked} "
            f"elapsed_ms={(perf_time.perf_counter()-t0)*1000:.1f}"
        )

        draft = ReportDraft(
            device_id=device_id,
            report_date=start,
            total_screen_time=screen.total_screen_time,
            most_used_apps=screen.most_used_apps,
            locations_visited=locations,
            calls_made=calls,
            sms_sent=sms,
            websites_blocked=blocked,
        )
        report = self.reports.save(draft)

        logger.info(
            f"ACTIVITY REPORT step=saved device={device_id} report_id={report.id} "
            f"elapsed_ms={(perf_time.perf_counter()-t0)*1000:.1f}"
        )
        return report

    def list(self, device_id: int, start: datetime, end: datetime) -> List[ActivityReport]:
        """Persisted reports with report_date in [start, end], newest first."""
        if start > end:
            return []
        return self.reports.query(device_id, start, end)
