"""Data repositories for the trade journal.

Provides abstracted data access through the Repository pattern:
- TradeRepository: Trade records (trades.json)
- SettingsRepository: Instrument settings (settings.json)
"""

from trade_journal.infrastructure.repositories.base import Repository, RepositoryError
from trade_journal.infrastructure.repositories.trade_repo import TradeRepository
from trade_journal.infrastructure.repositories.settings_repo import SettingsRepository

__all__ = [
    "Repository",
    "RepositoryError",
    "TradeRepository",
    "SettingsRepository",
]
