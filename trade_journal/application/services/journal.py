"""Journal Service: Log trades and recompute analytics.

Orchestrates the journal use cases:
1. Load records and instrument settings via repositories
2. Apply a mutation (add / edit / delete / settings) and persist it
3. Recompute every view from scratch (stats, equity, per-trade series,
   day rollups) and hand the numbers to the caller

There is no incremental update path: each snapshot is a full, eager
recomputation over the current record list.
"""

from __future__ import annotations

import dataclasses
import logging
import time
from dataclasses import dataclass
from datetime import date

from trade_journal.domain.commission import evaluate_trade
from trade_journal.domain.models import Direction, InstrumentConfig, TradeRecord
from trade_journal.domain.metrics import (
    DayRollup,
    Stats,
    build_drawdown_series,
    build_equity_series,
    group_by_day,
    summarize,
    summarize_day,
)
from trade_journal.infrastructure import (
    DataPaths,
    DEFAULT_PATHS,
    RepositoryError,
    SettingsRepository,
    TradeRepository,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Result Data Classes
# =============================================================================

@dataclass(frozen=True, slots=True)
class JournalSnapshot:
    """Everything the renderer needs after a change.

    Attributes:
        stats: Whole-journal summary
        equity: Cumulative net series (starts at 0)
        drawdown: Per-trade signed net series
        days: Per-day rollups keyed by date
    """
    stats: Stats
    equity: list[float]
    drawdown: list[float]
    days: dict[date, DayRollup]


@dataclass(frozen=True, slots=True)
class DayDetail:
    """Drill-down for a single day."""
    rollup: DayRollup
    stats: Stats


# =============================================================================
# Journal Service
# =============================================================================

class JournalService:
    """Service for logging trades and producing analytics.

    Example:
        >>> service = JournalService(DataPaths(root=Path("data")))
        >>> trade = service.new_trade(Direction.LONG, 1, 4500.0, 4502.5)
        >>> snapshot = service.add_trade(trade)
        >>> snapshot.stats.win_rate
        100.0
    """

    def __init__(
        self,
        paths: DataPaths = DEFAULT_PATHS,
        instrument: InstrumentConfig | None = None,
    ):
        """Initialize the service.

        Args:
            paths: Data paths configuration
            instrument: Instrument economics (loaded from settings if not provided)
        """
        self._paths = paths
        self._trade_repo = TradeRepository(paths)
        self._settings_repo = SettingsRepository(paths)
        self._instrument = instrument

    @property
    def instrument(self) -> InstrumentConfig:
        if self._instrument is None:
            self._instrument = self._settings_repo.get_all()
        return self._instrument

    def trades(self) -> list[TradeRecord]:
        """All stored records in file order."""
        return self._trade_repo.get_all()

    # --- Analytics ---

    def snapshot(self) -> JournalSnapshot:
        """Recompute every view over the current records."""
        records = self.trades()
        config = self.instrument
        return JournalSnapshot(
            stats=summarize(records, config),
            equity=build_equity_series(records, config),
            drawdown=build_drawdown_series(records, config),
            days=group_by_day(records, config),
        )

    def day_detail(self, day: date) -> DayDetail | None:
        """Drill-down for one day, None if the day has no valid trades."""
        records = self.trades()
        rollup = group_by_day(records, self.instrument).get(day)
        if rollup is None:
            return None
        return DayDetail(
            rollup=rollup,
            stats=summarize_day(records, day, self.instrument),
        )

    # --- Mutations ---

    def new_trade(
        self,
        direction: Direction,
        size: int,
        entry_price: float,
        exit_price: float,
        trade_date: date | None = None,
        **optional,
    ) -> TradeRecord:
        """Build a record with a millisecond-timestamp id.

        The id is bumped past any id already in the journal.

        Extra keyword arguments (stop_price, target_price, note, ...)
        are passed to TradeRecord.
        """
        now_ms = time.time_ns() // 1_000_000
        taken = {r.id for r in self.trades()}
        while str(now_ms) in taken:
            now_ms += 1
        return TradeRecord(
            id=str(now_ms),
            direction=direction,
            size=size,
            entry_price=entry_price,
            exit_price=exit_price,
            date=trade_date or date.today(),
            created_at=float(now_ms),
            **optional,
        )

    def add_trade(self, record: TradeRecord) -> JournalSnapshot:
        """Store a new trade and recompute.

        Raises:
            ValueError: If prices are non-finite or size is not positive
            RepositoryError: If the id already exists
        """
        if evaluate_trade(record, self.instrument) is None:
            raise ValueError(f"Invalid trade: {record.id}")
        self._trade_repo.add(record)
        logger.info("Added trade %s", record.id)
        return self.snapshot()

    def edit_trade(self, trade_id: str, **changes) -> JournalSnapshot:
        """Apply field changes to a stored trade and recompute.

        Raises:
            ValueError: If the edit changes the id or makes the trade invalid
            RepositoryError: If the id is unknown
        """
        existing = self._trade_repo.get(trade_id)
        if existing is None:
            raise RepositoryError(f"Trade not found: {trade_id}")
        edited = existing.replace(**changes)
        if edited.id != trade_id:
            raise ValueError("id cannot be changed")
        if evaluate_trade(edited, self.instrument) is None:
            raise ValueError(f"Invalid trade: {trade_id}")
        self._trade_repo.update(edited)
        logger.info("Edited trade %s", trade_id)
        return self.snapshot()

    def update_settings(self, **changes) -> JournalSnapshot:
        """Change instrument settings, persist them and recompute.

        Keyword arguments are InstrumentConfig fields; omitted fields keep
        their stored value.

        Raises:
            ValueError: If a value is out of range
        """
        config = dataclasses.replace(self._settings_repo.get_all(), **changes)
        self._settings_repo.save(config)
        self._instrument = config
        logger.info("Updated settings %s", config.to_dict())
        return self.snapshot()

    def delete_trade(self, trade_id: str) -> JournalSnapshot:
        """Delete a stored trade and recompute.

        Raises:
            RepositoryError: If the id is unknown
        """
        self._trade_repo.delete(trade_id)
        logger.info("Deleted trade %s", trade_id)
        return self.snapshot()
