"""
tests/test_report_builder.py
Report generation and listing against real stores on SQLite, plus
failure-path checks with mocked collaborators.
"""
from datetime import datetime, timedelta
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from guardian.models.enums import CallDirection, SmsDirection
from guardian.models.policy import WebFilter
from guardian.models.report import ActivityReport as ActivityReportRow
from guardian.models.telemetry import AppUsageSession, LocationPing, CallRecord, SmsRecord
from guardian.services.errors import InvalidWindow, DeviceNotFound, StoreUnavailable
from guardian.services.report_builder import ReportBuilder
from guardian.stores.config import ConfigStore
from guardian.stores.devices import DeviceStore
from guardian.stores.reports import ReportStore
from guardian.stores.telemetry import TelemetryStore

START = datetime(2024, 3, 1, 0, 0, 0)
END = datetime(2024, 3, 2, 0, 0, 0)


def _builder(db, strict: bool = True) -> ReportBuilder:
    return ReportBuilder(
        devices=DeviceStore(db),
        telemetry=TelemetryStore(db),
        config=ConfigStore(db),
        reports=ReportStore(db),
        strict_device_check=strict,
    )


def _usage(device_id, app, seconds, start_time):
    return AppUsageSession(
        device_id=device_id,
        app_name=app,
        package_name=f"com.example.{app.lower()}",
        usage_duration=seconds,
        start_time=start_time,
    )


def _ping(device_id, ts):
    return LocationPing(
        device_id=device_id,
        latitude=Decimal("41.00820000"),
        longitude=Decimal("28.97840000"),
        timestamp=ts,
    )


# ── SCENARIOS ────────────────────────────────────────────────

def test_generate_screen_time_and_ranking(db, device):
    db.add_all([
        _usage(device.id, "Instagram", 3600, START + timedelta(hours=9)),
        _usage(device.id, "TikTok", 7200, START + timedelta(hours=15)),
    ])
    db.commit()

    report = _builder(db).generate(device.id, START, END)

    assert report.total_screen_time == 10800
    assert [(a.app_name, a.usage_time) for a in report.most_used_apps] == [
        ("TikTok", 7200),
        ("Instagram", 3600),
    ]
    assert report.report_date == START
    assert report.device_id == device.id


def test_generate_mixed_direction_counts(db, device):
    db.add_all([
        _ping(device.id, START + timedelta(hours=1)),
        _ping(device.id, START + timedelta(hours=2)),
        CallRecord(device_id=device.id, phone_number="+905550000001", direction=CallDirection.outgoing,
                   duration=300, timestamp=START + timedelta(hours=3)),
        CallRecord(device_id=device.id, phone_number="+905550000002", direction=CallDirection.missed,
                   duration=0, timestamp=START + timedelta(hours=4)),
        SmsRecord(device_id=device.id, phone_number="+905550000001", direction=SmsDirection.sent,
                  message_length=50, timestamp=START + timedelta(hours=5)),
        SmsRecord(device_id=device.id, phone_number="+905550000002", direction=SmsDirection.received,
                  message_length=30, timestamp=START + timedelta(hours=6)),
        WebFilter(device_id=device.id, blocked_domains=["a.com", "b.com", "c.com"],
                  blocked_categories=[], allowed_domains=[]),
    ])
    db.commit()

    report = _builder(db).generate(device.id, START, END)

    assert report.locations_visited == 2
    assert report.calls_made == 1
    assert report.sms_sent == 1
    assert report.websites_blocked == 3


def test_window_boundaries_are_half_open(db, device):
    db.add_all([
        _usage(device.id, "AtStart", 10, START),
        _usage(device.id, "AtEnd", 20, END),
        _usage(device.id, "Before", 40, START - timedelta(seconds=1)),
        # Starts just inside the window and runs past the end: counted in full
        _usage(device.id, "Straddle", 5000, END - timedelta(milliseconds=1)),
        _ping(device.id, END),
        _ping(device.id, START),
    ])
    db.commit()

    report = _builder(db).generate(device.id, START, END)

    assert report.total_screen_time == 5010
    assert {a.app_name for a in report.most_used_apps} == {"AtStart", "Straddle"}
    assert report.locations_visited == 1


def test_empty_window_yields_zero_report(db, device):
    db.add_all([
        _usage(device.id, "YouTube", 600, START),
        _ping(device.id, START),
    ])
    db.commit()

    report = _builder(db).generate(device.id, START, START)

    assert report.total_screen_time == 0
    assert report.most_used_apps == []
    assert report.locations_visited == 0
    assert report.calls_made == 0
    assert report.sms_sent == 0
    assert report.websites_blocked == 0


def test_other_devices_are_ignored(db, device, child):
    from guardian.models.core import Device
    from guardian.models.enums import DeviceType

    other = Device(user_id=child.id, device_name="Tablet", device_type=DeviceType.ios, device_id="ext-2")
    db.add(other)
    db.commit()
    db.add(_usage(other.id, "Roblox", 9999, START + timedelta(hours=1)))
    db.commit()

    report = _builder(db).generate(device.id, START, END)
    assert report.total_screen_time == 0


def test_blocked_sites_ignore_window_and_inactive_filters(db, device):
    db.add_all([
        WebFilter(device_id=device.id, blocked_domains=["a.com", "b.com"],
                  blocked_categories=[], allowed_domains=[]),
        WebFilter(device_id=device.id, blocked_domains=["a.com"],
                  blocked_categories=[], allowed_domains=[]),
        WebFilter(device_id=device.id, blocked_domains=["x.com", "y.com", "z.com"],
                  blocked_categories=[], allowed_domains=[], is_active=False),
    ])
    db.commit()

    builder = _builder(db)
    day = builder.generate(device.id, START, END)
    year_ago = builder.generate(device.id, START - timedelta(days=365), START - timedelta(days=300))

    assert day.websites_blocked == 3
    assert year_ago.websites_blocked == day.websites_blocked


def test_regeneration_creates_new_report(db, device):
    db.add(_usage(device.id, "Spotify", 1200, START + timedelta(hours=2)))
    db.commit()

    builder = _builder(db)
    first = builder.generate(device.id, START, END)
    second = builder.generate(device.id, START, END)

    assert first.id != second.id
    assert first.model_dump(exclude={"id", "created_at"}) == second.model_dump(exclude={"id", "created_at"})
    assert db.query(ActivityReportRow).count() == 2


def test_report_date_is_window_start_not_generation_time(db, device):
    past = datetime(2020, 6, 1)
    report = _builder(db).generate(device.id, past, past + timedelta(days=1))
    assert report.report_date == past
    assert report.created_at > past + timedelta(days=1)


# ── ERRORS ───────────────────────────────────────────────────

def test_inverted_window_fails_before_store_access():
    devices, telemetry, config, reports = MagicMock(), MagicMock(), MagicMock(), MagicMock()
    builder = ReportBuilder(devices, telemetry, config, reports)

    with pytest.raises(InvalidWindow):
        builder.generate(1, END, START)

    for collaborator in (devices, telemetry, config, reports):
        assert collaborator.mock_calls == []


def test_unknown_device_strict(db):
    with pytest.raises(DeviceNotFound):
        _builder(db).generate(424242, START, END)
    assert db.query(ActivityReportRow).count() == 0


def test_unknown_device_lenient_gives_zero_report(db):
    report = _builder(db, strict=False).generate(424242, START, END)
    assert report.total_screen_time == 0
    assert report.most_used_apps == []


def test_store_failure_aborts_without_saving():
    devices = MagicMock()
    devices.exists.return_value = True
    telemetry = MagicMock()
    telemetry.query_app_usage.return_value = []
    telemetry.query_locations.side_effect = StoreUnavailable("telemetry.query_locations failed")
    reports = MagicMock()

    builder = ReportBuilder(devices, telemetry, MagicMock(), reports)

    with pytest.raises(StoreUnavailable):
        builder.generate(1, START, END)
    reports.save.assert_not_called()


# ── LISTING ──────────────────────────────────────────────────

def test_list_returns_reports_newest_window_first(db, device):
    builder = _builder(db)
    for day in (1, 3, 2):
        s = datetime(2024, 3, day)
        builder.generate(device.id, s, s + timedelta(days=1))

    listed = builder.list(device.id, datetime(2024, 3, 1), datetime(2024, 3, 3))

    assert [r.report_date for r in listed] == [
        datetime(2024, 3, 3),
        datetime(2024, 3, 2),
        datetime(2024, 3, 1),
    ]


def test_list_range_is_inclusive(db, device):
    builder = _builder(db)
    builder.generate(device.id, datetime(2024, 3, 1), datetime(2024, 3, 2))
    builder.generate(device.id, datetime(2024, 3, 5), datetime(2024, 3, 6))

    listed = builder.list(device.id, datetime(2024, 3, 1), datetime(2024, 3, 4))
    assert [r.report_date for r in listed] == [datetime(2024, 3, 1)]


def test_list_empty_for_unknown_device(db):
    assert _builder(db).list(999, START, END) == []
