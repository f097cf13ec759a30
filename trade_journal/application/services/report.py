"""Report Service: Export journal analytics as tables.

Turns the computed numbers into polars DataFrames:
1. trades: One row per valid trade with its derived money values
2. days: One row per trading day
3. equity: Cumulative net and per-trade net, oldest first
4. summary: Stats as metric/value pairs

and writes them to CSV, Parquet or Excel. Drawing charts is left to
whatever consumes these files.
"""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path

import polars as pl

from trade_journal.domain.commission import evaluate_trades, sort_chronologically
from trade_journal.domain.metrics import DayRollup, Stats, sorted_days
from trade_journal.domain.models import DEFAULT_INSTRUMENT, InstrumentConfig, TradeRecord
from trade_journal.infrastructure import DataPaths, DEFAULT_PATHS, ReportConfig
from trade_journal.application.services.journal import JournalSnapshot

logger = logging.getLogger(__name__)


TRADE_SCHEMA = {
    "id": pl.Utf8,
    "date": pl.Date,
    "direction": pl.Utf8,
    "size": pl.Int64,
    "entry_price": pl.Float64,
    "exit_price": pl.Float64,
    "stop_price": pl.Float64,
    "target_price": pl.Float64,
    "points": pl.Float64,
    "ticks": pl.Float64,
    "gross": pl.Float64,
    "commission": pl.Float64,
    "net": pl.Float64,
    "is_win": pl.Boolean,
    "setup_tag": pl.Utf8,
    "note": pl.Utf8,
}

DAY_SCHEMA = {
    "date": pl.Date,
    "trade_count": pl.Int64,
    "win_count": pl.Int64,
    "win_rate": pl.Float64,
    "net_total": pl.Float64,
    "points_total": pl.Float64,
}

MONEY_COLUMNS = {
    "gross", "commission", "net", "net_total", "equity",
}


def _optional(value: float | None) -> float | None:
    return None if value is None else float(value)


# =============================================================================
# Report Service
# =============================================================================

class ReportService:
    """Service for exporting journal reports.

    Example:
        >>> service = ReportService(paths)
        >>> saved = service.save_report(records, snapshot, "journal_report")
    """

    def __init__(
        self,
        paths: DataPaths = DEFAULT_PATHS,
        config: ReportConfig | None = None,
        instrument: InstrumentConfig = DEFAULT_INSTRUMENT,
    ):
        self._paths = paths
        self._config = config or ReportConfig()
        self._instrument = instrument

    @property
    def output_dir(self) -> Path:
        return self._config.output_dir or self._paths.reports_dir

    # --- Frames ---

    def trades_frame(self, records: list[TradeRecord]) -> pl.DataFrame:
        """One row per valid trade, oldest first."""
        columns: dict[str, list] = {name: [] for name in TRADE_SCHEMA}
        outcomes = sort_chronologically(evaluate_trades(records, self._instrument))
        for outcome in outcomes:
            record, result = outcome.record, outcome.result
            row = {
                "id": record.id,
                "date": record.date,
                "direction": record.direction.value,
                "size": record.size,
                "entry_price": float(record.entry_price),
                "exit_price": float(record.exit_price),
                "stop_price": _optional(record.stop_price),
                "target_price": _optional(record.target_price),
                "points": result.points,
                "ticks": result.ticks,
                "gross": result.gross,
                "commission": result.commission,
                "net": result.net,
                "is_win": result.is_win,
                "setup_tag": record.setup_tag,
                "note": record.note,
            }
            for name, value in row.items():
                columns[name].append(value)
        return pl.DataFrame(columns, schema=TRADE_SCHEMA)

    def days_frame(self, days: dict[date, DayRollup]) -> pl.DataFrame:
        """One row per trading day."""
        columns: dict[str, list] = {name: [] for name in DAY_SCHEMA}
        for rollup in sorted_days(days, descending=self._config.days_descending):
            for name, value in rollup.to_dict().items():
                columns[name].append(value)
        return pl.DataFrame(columns, schema=DAY_SCHEMA)

    def equity_frame(self, equity: list[float], drawdown: list[float]) -> pl.DataFrame:
        """Equity curve with the per-trade net that produced each step.

        Row 0 is the starting point (equity 0, no trade).
        """
        return pl.DataFrame(
            {
                "trade_no": list(range(len(equity))),
                "net": [None, *drawdown],
                "equity": equity,
            },
            schema={"trade_no": pl.Int64, "net": pl.Float64, "equity": pl.Float64},
        )

    def stats_frame(self, stats: Stats) -> pl.DataFrame:
        """Stats as metric/value rows."""
        items = stats.to_dict()
        return pl.DataFrame(
            {
                "metric": list(items.keys()),
                "value": [float(v) for v in items.values()],
            },
            schema={"metric": pl.Utf8, "value": pl.Float64},
        )

    def build_frames(
        self,
        records: list[TradeRecord],
        snapshot: JournalSnapshot,
    ) -> dict[str, pl.DataFrame]:
        """All report tables keyed by name."""
        return {
            "summary": self.stats_frame(snapshot.stats),
            "days": self.days_frame(snapshot.days),
            "trades": self.trades_frame(records),
            "equity": self.equity_frame(snapshot.equity, snapshot.drawdown),
        }

    # --- Output ---

    def save_report(
        self,
        records: list[TradeRecord],
        snapshot: JournalSnapshot,
        base_name: str = "journal_report",
        formats: tuple[str, ...] | None = None,
    ) -> list[Path]:
        """Save report to specified formats.

        CSV and Parquet produce one file per table
        ({base_name}_{table}.{fmt}); Excel produces one workbook with a
        sheet per table.

        Args:
            records: Trade records
            snapshot: Analytics computed over the same records
            base_name: Base filename without extension
            formats: Output formats (uses config if not provided)

        Returns:
            List of saved file paths

        Raises:
            ValueError: If a format is unknown
        """
        formats = formats or self._config.output_formats
        for fmt in formats:
            if fmt not in ("csv", "parquet", "xlsx"):
                raise ValueError(f"Unknown format: {fmt}")

        frames = self.build_frames(records, snapshot)
        output_dir = self.output_dir
        output_dir.mkdir(parents=True, exist_ok=True)
        saved = []

        for fmt in formats:
            if fmt == "xlsx":
                path = output_dir / f"{base_name}.xlsx"
                self._save_excel(frames, path)
                saved.append(path)
                continue

            for table, df in frames.items():
                path = output_dir / f"{base_name}_{table}.{fmt}"
                if fmt == "csv":
                    df.write_csv(path)
                else:
                    df.write_parquet(path)
                saved.append(path)

        logger.info("Saved %d report files to %s", len(saved), output_dir)
        return saved

    def _save_excel(self, frames: dict[str, pl.DataFrame], path: Path) -> None:
        """Save all tables to one workbook, one sheet per table."""
        import xlsxwriter

        workbook = xlsxwriter.Workbook(str(path))
        for table, df in frames.items():
            worksheet = workbook.add_worksheet(table.capitalize())
            self._write_sheet(workbook, worksheet, df)
        workbook.close()

    def _write_sheet(self, workbook, worksheet, df: pl.DataFrame) -> None:
        """Write DataFrame to Excel worksheet."""
        header_fmt = workbook.add_format({
            "bold": True,
            "bg_color": "#4472C4",
            "font_color": "white",
            "border": 1,
        })
        money_fmt = workbook.add_format({"num_format": "#,##0.00"})

        for col_idx, col_name in enumerate(df.columns):
            worksheet.write(0, col_idx, col_name, header_fmt)

        for row_idx, row in enumerate(df.iter_rows(named=True), 1):
            for col_idx, col_name in enumerate(df.columns):
                value = row[col_name]
                if value is None:
                    worksheet.write(row_idx, col_idx, "")
                elif isinstance(value, date):
                    worksheet.write(row_idx, col_idx, value.isoformat())
                elif col_name in MONEY_COLUMNS:
                    worksheet.write(row_idx, col_idx, value, money_fmt)
                else:
                    worksheet.write(row_idx, col_idx, value)

        for col_idx, col_name in enumerate(df.columns):
            worksheet.set_column(col_idx, col_idx, max(len(col_name), 10))
