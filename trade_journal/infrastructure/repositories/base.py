"""Base Repository: Abstract interface for data access.

Repository Pattern provides:
- Abstraction over the JSON files backing the journal
- Caching of the last loaded state
- Consistent error handling (RepositoryError)
- Easy testing via a tmp_path DataPaths
"""

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, TypeVar, Generic

T = TypeVar("T")

logger = logging.getLogger(__name__)


class Repository(ABC, Generic[T]):
    """Abstract base class for repositories.

    All repositories should:
    1. Provide a get_all() method
    2. Handle caching internally
    3. Raise RepositoryError on failures
    """

    @abstractmethod
    def get_all(self) -> T:
        """Retrieve all data from the repository.

        Returns:
            The complete dataset

        Raises:
            RepositoryError: If data cannot be loaded
        """
        pass

    @abstractmethod
    def clear_cache(self) -> None:
        """Clear any cached data."""
        pass


class RepositoryError(Exception):
    """Exception raised when repository operations fail."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(f"{message}" + (f" (path: {path})" if path else ""))


def read_json(path: Path) -> Any:
    """Load a JSON file, wrapping failures in RepositoryError."""
    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise RepositoryError(f"Failed to read JSON: {e}", str(path))


def write_json(path: Path, payload: Any) -> None:
    """Write a JSON file (pretty-printed, UTF-8)."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(payload, f, indent=2, ensure_ascii=False)
    except OSError as e:
        raise RepositoryError(f"Failed to write JSON: {e}", str(path))
    logger.info("Wrote %s", path)
