"""Entry point for running trade_journal as a module.

Usage:
    python -m trade_journal [--data-dir DIR] [command] [options]

Commands:
    summary     Show performance statistics
    days        Show per-day rollups
    day         Drill down into one day
    equity      Show equity and per-trade series
    add         Log a trade
    delete      Delete a trade
    export      Export report files
    settings    Show or change instrument settings

Examples:
    python -m trade_journal add --side long --size 2 --entry 4500 --exit 4505
    python -m trade_journal days --desc
    python -m trade_journal day 2024-01-02
    python -m trade_journal export -f csv,xlsx
"""

import sys

from trade_journal.interfaces.cli import main

if __name__ == "__main__":
    sys.exit(main())
