"""Trade Journal: Personal trade log with performance analytics.

Log closed trades (direction, size, entry/exit, optional stop/target)
and derive statistics, an equity curve, a per-trade result series and
per-day rollups from the accumulated history.

Architecture:
- domain/: Core business logic (models, commission, metrics)
- infrastructure/: JSON store and configuration
- application/: Use cases and services
- interfaces/: CLI
"""

__version__ = "0.3.0"

from trade_journal.domain import (
    Direction,
    TradeRecord,
    InstrumentConfig,
    DEFAULT_INSTRUMENT,
    Stats,
    EMPTY_STATS,
    summarize,
    build_equity_series,
    build_drawdown_series,
    group_by_day,
)
from trade_journal.infrastructure import (
    DataPaths,
    DEFAULT_PATHS,
    RepositoryError,
)

__all__ = [
    # Version
    "__version__",
    # Domain models
    "Direction",
    "TradeRecord",
    "InstrumentConfig",
    "DEFAULT_INSTRUMENT",
    # Analytics
    "Stats",
    "EMPTY_STATS",
    "summarize",
    "build_equity_series",
    "build_drawdown_series",
    "group_by_day",
    # Infrastructure
    "DataPaths",
    "DEFAULT_PATHS",
    "RepositoryError",
]
