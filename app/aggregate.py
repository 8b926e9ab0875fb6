"""
Day / month-to-date / year-to-date aggregation over sale records.

Windows are string prefixes of the reference date ("YYYY-MM-DD", "YYYY-MM",
"YYYY"), not calendar arithmetic. The caller validates the reference date.
"""

from __future__ import annotations

from typing import Dict, List, Sequence

from .models import AggregateResult, LeaderboardEntry, SaleRecord


def aggregate(records: Sequence[SaleRecord], reference_date: str) -> AggregateResult:
    month_key = reference_date[:7]
    year_key = reference_date[:4]

    # Plain left-to-right float addition; sum() compensates on 3.12+.
    total_day = 0.0
    total_month = 0.0
    total_year = 0.0
    day_records: List[SaleRecord] = []

    month_by_name: Dict[str, float] = {}
    day_by_name: Dict[str, float] = {}

    for record in records:
        if record.date.startswith(year_key):
            total_year += record.amount
        if record.date.startswith(month_key):
            total_month += record.amount
            month_by_name[record.salesperson] = month_by_name.get(record.salesperson, 0.0) + record.amount
        if record.date == reference_date:
            total_day += record.amount
            day_records.append(record)
            day_by_name[record.salesperson] = day_by_name.get(record.salesperson, 0.0) + record.amount

    entries: Dict[str, LeaderboardEntry] = {
        name: LeaderboardEntry(name=name, total_month_to_date=total)
        for name, total in month_by_name.items()
    }
    for name, total in day_by_name.items():
        entry = entries.setdefault(name, LeaderboardEntry(name=name))
        entry.total_day = total

    # sorted() is stable with reverse=True, ties keep month encounter order.
    leaderboard = sorted(entries.values(), key=lambda e: e.total_month_to_date, reverse=True)

    return AggregateResult(
        total_day=total_day,
        total_month_to_date=total_month,
        total_year_to_date=total_year,
        day_records=day_records,
        leaderboard=leaderboard,
    )
