"""
tests/test_aggregators.py
Pure metric reducers. Rows are plain namespaces; no database involved.
"""
import random
from types import SimpleNamespace

from guardian.models.enums import CallDirection, SmsDirection
from guardian.services.aggregators import (
    TOP_APPS_LIMIT,
    summarize_screen_time,
    count_locations,
    count_outgoing_calls,
    count_sent_sms,
    count_blocked_sites,
)


def _session(app_name: str, duration: int) -> SimpleNamespace:
    return SimpleNamespace(app_name=app_name, usage_duration=duration)


# ── SCREEN TIME / TOP APPS ───────────────────────────────────

def test_screen_time_empty_input():
    summary = summarize_screen_time([])
    assert summary.total_screen_time == 0
    assert summary.most_used_apps == []


def test_screen_time_ranks_descending():
    summary = summarize_screen_time([_session("Instagram", 3600), _session("TikTok", 7200)])
    assert summary.total_screen_time == 10800
    assert [(a.app_name, a.usage_time) for a in summary.most_used_apps] == [
        ("TikTok", 7200),
        ("Instagram", 3600),
    ]


def test_screen_time_accumulates_per_app():
    summary = summarize_screen_time([
        _session("YouTube", 100),
        _session("Chrome", 250),
        _session("YouTube", 200),
    ])
    assert summary.total_screen_time == 550
    assert [(a.app_name, a.usage_time) for a in summary.most_used_apps] == [
        ("YouTube", 300),
        ("Chrome", 250),
    ]


def test_screen_time_ties_keep_first_seen_order():
    summary = summarize_screen_time([
        _session("Maps", 60),
        _session("Clock", 60),
        _session("Notes", 90),
        _session("Camera", 60),
    ])
    assert [a.app_name for a in summary.most_used_apps] == ["Notes", "Maps", "Clock", "Camera"]


def test_screen_time_caps_ranking_at_ten():
    sessions = [_session(f"app{i}", i + 1) for i in range(25)]
    summary = summarize_screen_time(sessions)
    assert len(summary.most_used_apps) == TOP_APPS_LIMIT == 10
    assert summary.most_used_apps[0].app_name == "app24"
    assert summary.total_screen_time == sum(range(1, 26))


def test_screen_time_randomized_properties():
    rng = random.Random(1234)
    for _ in range(50):
        sessions = [
            _session(f"app{rng.randint(0, 30)}", rng.randint(0, 5000))
            for _ in range(rng.randint(0, 80))
        ]
        summary = summarize_screen_time(sessions)
        usage = [a.usage_time for a in summary.most_used_apps]

        assert summary.total_screen_time == sum(s.usage_duration for s in sessions)
        assert len(usage) <= 10
        assert usage == sorted(usage, reverse=True)

        shuffled = list(sessions)
        rng.shuffle(shuffled)
        assert summarize_screen_time(shuffled).total_screen_time == summary.total_screen_time


# ── COUNTERS ─────────────────────────────────────────────────

def test_locations_are_not_deduplicated():
    same_spot = SimpleNamespace(latitude=41.0082, longitude=28.9784)
    assert count_locations([same_spot, same_spot, same_spot]) == 3
    assert count_locations([]) == 0


def test_only_outgoing_calls_count():
    calls = [
        SimpleNamespace(direction=CallDirection.outgoing),
        SimpleNamespace(direction=CallDirection.incoming),
        SimpleNamespace(direction=CallDirection.missed),
        SimpleNamespace(direction=CallDirection.outgoing),
    ]
    assert count_outgoing_calls(calls) == 2


def test_only_sent_sms_count():
    messages = [
        SimpleNamespace(direction=SmsDirection.sent),
        SimpleNamespace(direction=SmsDirection.received),
        SimpleNamespace(direction=SmsDirection.received),
    ]
    assert count_sent_sms(messages) == 1


def test_blocked_sites_double_count_across_filters():
    filters = [
        SimpleNamespace(blocked_domains=["a.com", "b.com", "c.com"]),
        SimpleNamespace(blocked_domains=["a.com"]),
        SimpleNamespace(blocked_domains=[]),
    ]
    assert count_blocked_sites(filters) == 4
    assert count_blocked_sites([]) == 0
