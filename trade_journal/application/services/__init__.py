"""Application Services for the trade journal.

Services orchestrate repository access to implement use cases.

Available services:
- JournalService: Log / edit / delete trades and recompute analytics
- ReportService: Export analytics as CSV, Parquet or Excel
"""

from trade_journal.application.services.journal import (
    JournalService,
    JournalSnapshot,
    DayDetail,
)
from trade_journal.application.services.report import ReportService

__all__ = [
    "JournalService",
    "JournalSnapshot",
    "DayDetail",
    "ReportService",
]
