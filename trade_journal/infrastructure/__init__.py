"""Infrastructure layer for the trade journal.

Contains:
- config: Data paths and report configuration
- repositories: Data access abstractions
"""

from trade_journal.infrastructure.config import (
    DataPaths,
    ReportConfig,
    DEFAULT_PATHS,
    DEFAULT_REPORT_CONFIG,
)
from trade_journal.infrastructure.repositories import (
    Repository,
    RepositoryError,
    TradeRepository,
    SettingsRepository,
)

__all__ = [
    # Config
    "DataPaths",
    "ReportConfig",
    "DEFAULT_PATHS",
    "DEFAULT_REPORT_CONFIG",
    # Repositories
    "Repository",
    "RepositoryError",
    "TradeRepository",
    "SettingsRepository",
]
