"""Commission Model: Turn a raw trade into points and money.

Formula:
    points     = exit - entry          (long)
               = entry - exit          (short)
    gross      = points × point_value × size
    commission = commission_per_unit × size
    net        = gross - commission

A trade is a win only when net > 0. Net == 0 is a scratch.

This module also owns the chronological ordering shared by every
time-ordered metric: (date, created_at → numeric id → id).
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from datetime import date
from typing import Iterable

from trade_journal.domain.models import (
    DEFAULT_INSTRUMENT,
    Direction,
    InstrumentConfig,
    TradeRecord,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Data Classes
# =============================================================================

@dataclass(frozen=True, slots=True)
class TradeResult:
    """Money result of one trade.

    Attributes:
        points: Signed price move in the trade's favour
        ticks: points expressed in ticks
        gross: Money result before commission
        commission: Commission paid (always >= 0)
        net: gross - commission
    """
    points: float
    ticks: float
    gross: float
    commission: float
    net: float

    @property
    def is_win(self) -> bool:
        return self.net > 0

    @property
    def is_loss(self) -> bool:
        return self.net < 0

    @property
    def is_scratch(self) -> bool:
        return self.net == 0


@dataclass(frozen=True, slots=True)
class TradeOutcome:
    """A record paired with its freshly computed result."""
    record: TradeRecord
    result: TradeResult

    @property
    def date(self) -> date:
        return self.record.date

    @property
    def net(self) -> float:
        return self.result.net

    @property
    def points(self) -> float:
        return self.result.points

    @property
    def is_win(self) -> bool:
        return self.result.is_win

    @property
    def is_loss(self) -> bool:
        return self.result.is_loss


# =============================================================================
# Core Calculation
# =============================================================================

def _is_finite_number(value: object) -> bool:
    return (
        isinstance(value, (int, float))
        and not isinstance(value, bool)
        and math.isfinite(value)
    )


def compute_trade_result(
    direction: Direction,
    entry: float,
    exit: float,
    size: int,
    commission_per_unit: float = DEFAULT_INSTRUMENT.commission_per_unit,
    point_value: float = DEFAULT_INSTRUMENT.point_value,
    tick_size: float = DEFAULT_INSTRUMENT.tick_size,
) -> TradeResult | None:
    """Compute points, gross, commission and net for one trade.

    Args:
        direction: Long or short
        entry: Entry price
        exit: Exit price
        size: Number of contracts (positive integer)
        commission_per_unit: Commission per contract
        point_value: Money per point per contract
        tick_size: Minimum price increment

    Returns:
        TradeResult, or None when prices are non-finite, size is not
        a positive integer, the commission rate is negative or the
        result overflows.

    Example:
        >>> r = compute_trade_result(Direction.LONG, 4500, 4505, 2, 0.62, 5)
        >>> r.points, r.gross, r.commission
        (5.0, 50.0, 1.24)
    """
    if not _is_finite_number(entry) or not _is_finite_number(exit):
        return None
    if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
        return None
    if not isinstance(direction, Direction):
        return None
    if not _is_finite_number(commission_per_unit) or commission_per_unit < 0:
        return None

    points = float(exit - entry) if direction is Direction.LONG else float(entry - exit)
    gross = points * point_value * size
    commission = commission_per_unit * size
    net = gross - commission
    ticks = points / tick_size
    if not math.isfinite(net) or not math.isfinite(ticks):
        return None

    return TradeResult(
        points=points,
        ticks=ticks,
        gross=gross,
        commission=commission,
        net=net,
    )


def evaluate_trade(
    record: TradeRecord,
    config: InstrumentConfig = DEFAULT_INSTRUMENT,
) -> TradeOutcome | None:
    """Compute a record's result, None if the record is invalid."""
    result = compute_trade_result(
        record.direction,
        record.entry_price,
        record.exit_price,
        record.size,
        config.commission_per_unit,
        config.point_value,
        config.tick_size,
    )
    if result is None:
        return None
    return TradeOutcome(record=record, result=result)


def evaluate_trades(
    records: Iterable[TradeRecord],
    config: InstrumentConfig = DEFAULT_INSTRUMENT,
) -> list[TradeOutcome]:
    """Evaluate every record, silently dropping invalid ones.

    Input order is preserved.
    """
    outcomes = []
    for record in records:
        outcome = evaluate_trade(record, config)
        if outcome is None:
            logger.debug("Skipping invalid trade record %s", record.id)
            continue
        outcomes.append(outcome)
    return outcomes


# =============================================================================
# Chronological Ordering
# =============================================================================

def _tiebreak(record: TradeRecord) -> tuple[int, float, str]:
    # created_at and numeric ids are both millisecond timestamps, so they
    # share one rank and interleave by value.
    if record.created_at is not None and math.isfinite(record.created_at):
        return (0, float(record.created_at), record.id)
    try:
        numeric_id = float(record.id)
    except ValueError:
        numeric_id = math.nan
    if math.isfinite(numeric_id):
        return (0, numeric_id, record.id)
    return (1, 0.0, record.id)


def chronological_key(item: TradeRecord | TradeOutcome) -> tuple:
    """Sort key: trade date, then insertion order within the day."""
    record = item.record if isinstance(item, TradeOutcome) else item
    return (record.date, _tiebreak(record))


def sort_chronologically(
    items: Iterable[TradeOutcome],
    descending: bool = False,
) -> list[TradeOutcome]:
    """Oldest first (or most recent first with descending=True)."""
    ordered = sorted(items, key=chronological_key)
    if descending:
        ordered.reverse()
    return ordered

