"""Domain Layer: Core business logic and entities.

This layer contains:
- models.py: Data structures (Direction, TradeRecord, InstrumentConfig)
- commission.py: Points/money result of a trade and chronological ordering
- metrics/: Statistics, chart series and day rollups

Everything here is pure: no I/O, no module state.
"""

from trade_journal.domain.models import (
    Direction,
    TradeRecord,
    InstrumentConfig,
    DEFAULT_INSTRUMENT,
)
from trade_journal.domain.commission import (
    TradeResult,
    TradeOutcome,
    compute_trade_result,
    evaluate_trade,
    evaluate_trades,
    chronological_key,
    sort_chronologically,
)
from trade_journal.domain.metrics import (
    # Statistics
    Stats,
    EMPTY_STATS,
    PROFIT_FACTOR_CAP,
    summarize,
    # Series
    build_equity_series,
    build_drawdown_series,
    # Daily
    DayRollup,
    group_by_day,
    sorted_days,
    summarize_day,
)

__all__ = [
    # Models
    "Direction",
    "TradeRecord",
    "InstrumentConfig",
    "DEFAULT_INSTRUMENT",
    # Commission
    "TradeResult",
    "TradeOutcome",
    "compute_trade_result",
    "evaluate_trade",
    "evaluate_trades",
    "chronological_key",
    "sort_chronologically",
    # Metrics - Statistics
    "Stats",
    "EMPTY_STATS",
    "PROFIT_FACTOR_CAP",
    "summarize",
    # Metrics - Series
    "build_equity_series",
    "build_drawdown_series",
    # Metrics - Daily
    "DayRollup",
    "group_by_day",
    "sorted_days",
    "summarize_day",
]
