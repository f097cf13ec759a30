"""Trade Repository: Access to the journal's trade records.

Provides read/write access to trades.json, a JSON list of trade objects.
Both the current snake_case shape and the legacy camelCase shape
(isLong, contracts, entryPrice, ...) are readable; writes always use
the snake_case shape.

Every mutation rewrites the whole file.
"""

import logging

from trade_journal.domain.models import TradeRecord
from trade_journal.infrastructure.repositories.base import (
    Repository,
    RepositoryError,
    read_json,
    write_json,
)
from trade_journal.infrastructure.config import DataPaths, DEFAULT_PATHS

logger = logging.getLogger(__name__)


class TradeRepository(Repository[list[TradeRecord]]):
    """Repository for trade records.

    Example:
        >>> repo = TradeRepository(DataPaths(root=Path("data")))
        >>> trades = repo.get_all()
        >>> repo.add(trade)
        >>> repo.delete(trade.id)
    """

    def __init__(self, paths: DataPaths = DEFAULT_PATHS):
        self._paths = paths
        self._cache: list[TradeRecord] | None = None

    def get_all(self) -> list[TradeRecord]:
        """Load all trade records.

        Returns:
            List of TradeRecord in file order (empty if no file yet)

        Raises:
            RepositoryError: If the file is unreadable or a row is malformed
        """
        if self._cache is not None:
            return list(self._cache)

        path = self._paths.trades_file
        if not path.exists():
            self._cache = []
            return []

        rows = read_json(path)
        if not isinstance(rows, list):
            raise RepositoryError("Trade file must contain a JSON list", str(path))

        records = []
        for i, row in enumerate(rows):
            if not isinstance(row, dict):
                raise RepositoryError(f"Trade row {i} is not an object", str(path))
            try:
                records.append(TradeRecord.from_dict(row))
            except ValueError as e:
                raise RepositoryError(f"Malformed trade row {i}: {e}", str(path))

        logger.debug("Loaded %d trades from %s", len(records), path)
        self._cache = records
        return list(records)

    def get(self, trade_id: str) -> TradeRecord | None:
        """Get a record by id (None if not found)."""
        for record in self.get_all():
            if record.id == trade_id:
                return record
        return None

    def add(self, record: TradeRecord) -> None:
        """Append a new record.

        Raises:
            RepositoryError: If the id already exists
        """
        records = self.get_all()
        if any(r.id == record.id for r in records):
            raise RepositoryError(f"Trade already exists: {record.id}")
        records.append(record)
        self.save(records)

    def update(self, record: TradeRecord) -> None:
        """Replace the stored record with the same id.

        Raises:
            RepositoryError: If the id is unknown
        """
        records = self.get_all()
        for i, existing in enumerate(records):
            if existing.id == record.id:
                records[i] = record
                self.save(records)
                return
        raise RepositoryError(f"Trade not found: {record.id}")

    def delete(self, trade_id: str) -> TradeRecord:
        """Remove a record by id.

        Returns:
            The removed record

        Raises:
            RepositoryError: If the id is unknown
        """
        records = self.get_all()
        for i, existing in enumerate(records):
            if existing.id == trade_id:
                removed = records.pop(i)
                self.save(records)
                return removed
        raise RepositoryError(f"Trade not found: {trade_id}")

    def save(self, records: list[TradeRecord]) -> None:
        """Persist the full collection."""
        write_json(self._paths.trades_file, [r.to_dict() for r in records])
        self._cache = list(records)

    def clear_cache(self) -> None:
        """Clear cached data."""
        self._cache = None
