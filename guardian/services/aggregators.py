# guardian/services/aggregators.py
"""
Metric reducers used by the activity report.

Each function is a pure reduction over rows a store has already fetched
for one device and window. They never touch the database.
"""
from dataclasses import dataclass, field
from typing import Dict, Iterable, List

from guardian.models.enums import CallDirection, SmsDirection
from guardian.schemas.report import AppUsageRank

TOP_APPS_LIMIT = 10


@dataclass(frozen=True)
class ScreenTimeSummary:
    total_screen_time: int = 0
    most_used_apps: List[AppUsageRank] = field(default_factory=list)


def summarize_screen_time(sessions: Iterable, limit: int = TOP_APPS_LIMIT) -> ScreenTimeSummary:
    """Total usage plus the top apps by cumulative usage, in one scan.

    Ties keep the order in which each app first appeared in the scan:
    dicts preserve insertion order and `sorted` is stable, also with
    reverse=True.
    """
    total = 0
    per_app: Dict[str, int] = {}
    for s in sessions:
        total += s.usage_duration
        per_app[s.app_name] = per_app.get(s.app_name, 0) + s.usage_duration

    ranked = sorted(per_app.items(), key=lambda item: item[1], reverse=True)[:limit]
    return ScreenTimeSummary(
        total_screen_time=total,
        most_used_apps=[AppUsageRank(app_name=name, usage_time=secs) for name, secs in ranked],
    )


def count_locations(pings: Iterable) -> int:
    # Raw event count; repeated pings at the same spot all count
    return sum(1 for _ in pings)


def count_outgoing_calls(calls: Iterable) -> int:
    return sum(1 for c in calls if c.direction == CallDirection.outgoing)


def count_sent_sms(messages: Iterable) -> int:
    return sum(1 for m in messages if m.direction == SmsDirection.sent)


def count_blocked_sites(active_filters: Iterable) -> int:
    """Sum of blocked-domain list lengths. Domains repeated across filters count twice."""
    return sum(len(f.blocked_domains) for f in active_filters)
