"""Application Layer: Use cases and service orchestration.

This layer contains:
- services/: Business logic orchestration
  - journal.py: Trade logging and analytics snapshots
  - report.py: Report export
"""

from trade_journal.application.services import (
    JournalService,
    JournalSnapshot,
    DayDetail,
    ReportService,
)

__all__ = [
    "JournalService",
    "JournalSnapshot",
    "DayDetail",
    "ReportService",
]
