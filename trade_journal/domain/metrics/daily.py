"""Day Aggregator: Per-day rollups for the calendar view.

Groups trades by their calendar date (never by creation time) and
reports, per day:
- net_total: Sum of net amounts
- win_rate: Wins / trades × 100
- points_total: Sum of signed points

Drill-down reuses the statistics engine on the day's subset. Because
summarize() has no global normalisation, a day's Stats mean the same
thing as the whole-journal Stats restricted to that day.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable

from trade_journal.domain.commission import (
    TradeOutcome,
    evaluate_trades,
    sort_chronologically,
)
from trade_journal.domain.metrics.statistics import Stats, summarize_outcomes
from trade_journal.domain.models import DEFAULT_INSTRUMENT, InstrumentConfig, TradeRecord


# =============================================================================
# Data Classes
# =============================================================================

@dataclass(frozen=True, slots=True)
class DayRollup:
    """Summary of one trading day.

    Attributes:
        day: Calendar date
        records: The day's valid records, oldest first
        net_total: Sum of net amounts
        win_rate: win_count / trade_count × 100
        points_total: Sum of signed points
        trade_count: Number of trades
        win_count: Number of winning trades
    """
    day: date
    records: tuple[TradeRecord, ...]
    net_total: float
    win_rate: float
    points_total: float
    trade_count: int
    win_count: int

    @property
    def is_green(self) -> bool:
        """Day closed with a positive net."""
        return self.net_total > 0

    def to_dict(self) -> dict:
        """Convert to dictionary for DataFrame creation (records omitted)."""
        return {
            "date": self.day,
            "trade_count": self.trade_count,
            "win_count": self.win_count,
            "win_rate": self.win_rate,
            "net_total": self.net_total,
            "points_total": self.points_total,
        }


# =============================================================================
# Aggregation
# =============================================================================

def _rollup(day: date, outcomes: list[TradeOutcome]) -> DayRollup:
    ordered = sort_chronologically(outcomes)
    wins = sum(1 for o in ordered if o.is_win)
    return DayRollup(
        day=day,
        records=tuple(o.record for o in ordered),
        net_total=sum(o.net for o in ordered),
        win_rate=wins / len(ordered) * 100,
        points_total=sum(o.points for o in ordered),
        trade_count=len(ordered),
        win_count=wins,
    )


def group_by_day(
    records: Iterable[TradeRecord],
    config: InstrumentConfig = DEFAULT_INSTRUMENT,
) -> dict[date, DayRollup]:
    """Group valid records by date.

    Args:
        records: Trade records in any order
        config: Instrument economics

    Returns:
        Mapping of date to DayRollup, one key per distinct date.
        Key order is not meaningful; use sorted_days() for display.
    """
    buckets: dict[date, list[TradeOutcome]] = {}
    for outcome in evaluate_trades(records, config):
        buckets.setdefault(outcome.date, []).append(outcome)
    return {day: _rollup(day, outcomes) for day, outcomes in buckets.items()}


def sorted_days(
    rollups: dict[date, DayRollup],
    descending: bool = False,
) -> list[DayRollup]:
    """Rollups ordered by date (most recent first with descending=True)."""
    return sorted(rollups.values(), key=lambda r: r.day, reverse=descending)


def day_records(records: Iterable[TradeRecord], day: date) -> list[TradeRecord]:
    """Records whose date is ``day`` (valid or not)."""
    return [r for r in records if r.date == day]


def summarize_day(
    records: Iterable[TradeRecord],
    day: date,
    config: InstrumentConfig = DEFAULT_INSTRUMENT,
) -> Stats:
    """Drill-down: Stats for a single day's subset."""
    return summarize_outcomes(evaluate_trades(day_records(records, day), config))
