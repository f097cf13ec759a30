"""Trading metrics for journal performance analysis.

This package provides the analytics computed from the trade history:

- Statistics: Scalar summary (win rate, expectancy, drawdown, streaks, ...)
- Series: Equity curve and per-trade net series for charts
- Daily: Per-day rollups and day drill-down

Usage:
    from trade_journal.domain.metrics import (
        summarize,
        build_equity_series,
        group_by_day,
    )
"""

# Statistics
from trade_journal.domain.metrics.statistics import (
    Stats,
    EMPTY_STATS,
    PROFIT_FACTOR_CAP,
    summarize,
    summarize_outcomes,
    calculate_max_drawdown,
    calculate_current_streak,
    calculate_best_day,
    calculate_average_risk_reward,
    floor_to_tenth,
)

# Series
from trade_journal.domain.metrics.series import (
    build_equity_series,
    build_drawdown_series,
)

# Daily
from trade_journal.domain.metrics.daily import (
    DayRollup,
    group_by_day,
    sorted_days,
    day_records,
    summarize_day,
)

__all__ = [
    # Statistics
    "Stats",
    "EMPTY_STATS",
    "PROFIT_FACTOR_CAP",
    "summarize",
    "summarize_outcomes",
    "calculate_max_drawdown",
    "calculate_current_streak",
    "calculate_best_day",
    "calculate_average_risk_reward",
    "floor_to_tenth",
    # Series
    "build_equity_series",
    "build_drawdown_series",
    # Daily
    "DayRollup",
    "group_by_day",
    "sorted_days",
    "day_records",
    "summarize_day",
]
