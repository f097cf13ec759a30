"""Command Line Interface for the trade journal.

Provides CLI access to journal functions:
- summary: Show performance statistics
- days: Show per-day rollups
- day: Drill down into one day
- equity: Show equity and per-trade series
- add: Log a trade
- delete: Delete a trade
- export: Write report files
- settings: Show or change instrument settings

Usage:
    python -m trade_journal summary
    python -m trade_journal day 2024-01-02
    python -m trade_journal add --side short --size 1 --entry 4510 --exit 4502
"""

import argparse
import logging
import sys
from datetime import date
from pathlib import Path

from trade_journal import __version__
from trade_journal.domain import Direction, Stats, sorted_days
from trade_journal.infrastructure import DataPaths, DEFAULT_PATHS, ReportConfig, RepositoryError
from trade_journal.application import JournalService, ReportService


def _money(value: float) -> str:
    return f"{value:+,.2f}"


def _print_stats(stats: Stats) -> None:
    if stats.is_empty:
        print("No trades recorded.")
        return

    pf = "999+" if stats.profit_factor_capped else f"{stats.profit_factor:.2f}"
    print(f"  Total trades:    {stats.total_trades}"
          f"  (W {stats.win_count} / L {stats.loss_count} / S {stats.scratch_count})")
    print(f"  Win rate:        {stats.win_rate:.1f}%")
    print(f"  Avg win:         {stats.avg_win:,.2f}")
    print(f"  Avg loss:        {stats.avg_loss:,.2f}")
    print(f"  Avg R:R:         1:{stats.avg_risk_reward:.2f}")
    print(f"  Profit factor:   {pf}")
    print(f"  Expectancy:      {_money(stats.expectancy)}")
    print(f"  Net total:       {_money(stats.total_net)}  ({stats.total_points:+.2f} pts)")
    print(f"  Max drawdown:    {stats.max_drawdown:,.2f}")
    print(f"  Best / worst:    {_money(stats.best_trade)} / {_money(stats.worst_trade)}")
    print(f"  Best day:        {_money(stats.best_day)}")
    print(f"  Current streak:  {stats.current_streak:+d}")


def _parse_day(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid date (YYYY-MM-DD): {value}")


def cmd_summary(args: argparse.Namespace, service: JournalService) -> int:
    """Show performance statistics."""
    print(f"Trade Journal v{__version__}")
    print("=" * 50)
    _print_stats(service.snapshot().stats)
    return 0


def cmd_days(args: argparse.Namespace, service: JournalService) -> int:
    """Show per-day rollups."""
    snapshot = service.snapshot()
    if not snapshot.days:
        print("No trades recorded.")
        return 0

    print(f"{'Date':<12} {'Trades':>6} {'Win%':>7} {'Points':>9} {'Net':>12}")
    print("-" * 50)
    for rollup in sorted_days(snapshot.days, descending=args.desc):
        print(f"{rollup.day.isoformat():<12} {rollup.trade_count:>6} "
              f"{rollup.win_rate:>6.1f}% {rollup.points_total:>+9.2f} "
              f"{_money(rollup.net_total):>12}")
    return 0


def cmd_day(args: argparse.Namespace, service: JournalService) -> int:
    """Drill down into one day."""
    detail = service.day_detail(args.date)
    if detail is None:
        print(f"No trades on {args.date.isoformat()}")
        return 1

    print(f"[{args.date.isoformat()}]")
    print("=" * 50)
    _print_stats(detail.stats)
    print()
    print("Trades:")
    for record in detail.rollup.records:
        side = record.direction.value.upper()
        print(f"  {record.id:<16} {side:<5} x{record.size} "
              f"{record.entry_price:.2f} -> {record.exit_price:.2f}")
    return 0


def cmd_equity(args: argparse.Namespace, service: JournalService) -> int:
    """Show equity and per-trade series."""
    snapshot = service.snapshot()
    print(f"{'#':>4} {'Net':>12} {'Equity':>12}")
    print("-" * 30)
    print(f"{0:>4} {'':>12} {snapshot.equity[0]:>12,.2f}")
    for i, (net, equity) in enumerate(zip(snapshot.drawdown, snapshot.equity[1:]), 1):
        print(f"{i:>4} {_money(net):>12} {equity:>12,.2f}")
    return 0


def cmd_add(args: argparse.Namespace, service: JournalService) -> int:
    """Log a trade."""
    record = service.new_trade(
        Direction(args.side),
        args.size,
        args.entry,
        args.exit,
        trade_date=args.date,
        stop_price=args.stop,
        target_price=args.target,
        note=args.note,
        setup_tag=args.setup,
    )
    snapshot = service.add_trade(record)
    print(f"Added trade {record.id}")
    _print_stats(snapshot.stats)
    return 0


def cmd_delete(args: argparse.Namespace, service: JournalService) -> int:
    """Delete a trade."""
    service.delete_trade(args.trade_id)
    print(f"Deleted trade {args.trade_id}")
    return 0


def cmd_settings(args: argparse.Namespace, service: JournalService) -> int:
    """Show or change instrument settings."""
    changes = {
        name: value
        for name, value in (
            ("commission_per_unit", args.commission),
            ("point_value", args.point_value),
            ("tick_size", args.tick_size),
        )
        if value is not None
    }
    if changes:
        service.update_settings(**changes)
        print("Settings saved.")

    config = service.instrument
    print(f"  Commission/unit: {config.commission_per_unit:.2f}")
    print(f"  Point value:     {config.point_value:g}")
    print(f"  Tick size:       {config.tick_size:g}")
    return 0


def cmd_export(args: argparse.Namespace, service: JournalService) -> int:
    """Write report files."""
    config = ReportConfig(
        output_dir=Path(args.output_dir) if args.output_dir else None,
        output_formats=tuple(args.formats.split(",")),
        days_descending=args.desc,
    )
    reporter = ReportService(service_paths(args), config, service.instrument)
    saved = reporter.save_report(service.trades(), service.snapshot(), args.output)
    for path in saved:
        print(f"Saved: {path}")
    return 0


def service_paths(args: argparse.Namespace) -> DataPaths:
    return DataPaths(root=Path(args.data_dir)) if args.data_dir else DEFAULT_PATHS


def main(argv: list[str] | None = None) -> int:
    """Main entry point for CLI."""
    parser = argparse.ArgumentParser(
        prog="trade_journal",
        description="Trade Journal - Performance Analytics",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-d", "--data-dir",
        default=None,
        help="Directory holding trades.json and settings.json",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # summary command
    subparsers.add_parser("summary", help="Show performance statistics")

    # days command
    days_parser = subparsers.add_parser("days", help="Show per-day rollups")
    days_parser.add_argument(
        "--desc",
        action="store_true",
        help="Most recent day first",
    )

    # day command
    day_parser = subparsers.add_parser("day", help="Drill down into one day")
    day_parser.add_argument("date", type=_parse_day, help="Day (YYYY-MM-DD)")

    # equity command
    subparsers.add_parser("equity", help="Show equity and per-trade series")

    # add command
    add_parser = subparsers.add_parser("add", help="Log a trade")
    add_parser.add_argument("--side", choices=["long", "short"], required=True)
    add_parser.add_argument("--size", type=int, default=1, help="Contracts")
    add_parser.add_argument("--entry", type=float, required=True, help="Entry price")
    add_parser.add_argument("--exit", type=float, required=True, help="Exit price")
    add_parser.add_argument("--stop", type=float, default=None, help="Stop price")
    add_parser.add_argument("--target", type=float, default=None, help="Target price")
    add_parser.add_argument("--date", type=_parse_day, default=None, help="Trade day")
    add_parser.add_argument("--note", default=None)
    add_parser.add_argument("--setup", default=None, help="Setup tag")

    # delete command
    delete_parser = subparsers.add_parser("delete", help="Delete a trade")
    delete_parser.add_argument("trade_id", help="Trade id")

    # settings command
    settings_parser = subparsers.add_parser("settings", help="Show or change instrument settings")
    settings_parser.add_argument("--commission", type=float, default=None, help="Commission per contract")
    settings_parser.add_argument("--point-value", type=float, default=None, help="Money per point per contract")
    settings_parser.add_argument("--tick-size", type=float, default=None, help="Minimum price increment")

    # export command
    export_parser = subparsers.add_parser("export", help="Export report files")
    export_parser.add_argument(
        "-o", "--output",
        default="journal_report",
        help="Output base filename (without extension)",
    )
    export_parser.add_argument(
        "-f", "--formats",
        default="csv",
        help="Output formats (comma-separated: csv,parquet,xlsx)",
    )
    export_parser.add_argument(
        "--output-dir",
        default=None,
        help="Output directory (defaults to <data dir>/reports)",
    )
    export_parser.add_argument(
        "--desc",
        action="store_true",
        help="Most recent day first in the days table",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "summary": cmd_summary,
        "days": cmd_days,
        "day": cmd_day,
        "equity": cmd_equity,
        "add": cmd_add,
        "delete": cmd_delete,
        "export": cmd_export,
        "settings": cmd_settings,
    }

    service = JournalService(paths=service_paths(args))
    try:
        return commands[args.command](args, service)
    except (RepositoryError, ValueError) as e:
        print(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
