"""Settings Repository: Access to instrument settings.

Provides read/write access to settings.json:
    {"commission_per_unit": 0.62, "point_value": 5, "tick_size": 0.25}

Missing file or missing keys fall back to DEFAULT_INSTRUMENT.
Unknown keys are ignored.
"""

from trade_journal.domain.models import DEFAULT_INSTRUMENT, InstrumentConfig
from trade_journal.infrastructure.repositories.base import (
    Repository,
    RepositoryError,
    read_json,
    write_json,
)
from trade_journal.infrastructure.config import DataPaths, DEFAULT_PATHS


class SettingsRepository(Repository[InstrumentConfig]):
    """Repository for instrument settings.

    Example:
        >>> repo = SettingsRepository()
        >>> config = repo.get_all()
        >>> config.point_value
        5.0
    """

    FIELDS = ("commission_per_unit", "point_value", "tick_size")

    def __init__(self, paths: DataPaths = DEFAULT_PATHS):
        self._paths = paths
        self._cache: InstrumentConfig | None = None

    def get_all(self) -> InstrumentConfig:
        """Load instrument settings.

        Raises:
            RepositoryError: If the file is unreadable or values are invalid
        """
        if self._cache is not None:
            return self._cache

        path = self._paths.settings_file
        if not path.exists():
            self._cache = DEFAULT_INSTRUMENT
            return self._cache

        data = read_json(path)
        if not isinstance(data, dict):
            raise RepositoryError("Settings file must contain a JSON object", str(path))

        values = {k: data[k] for k in self.FIELDS if k in data}
        try:
            config = InstrumentConfig(**{**DEFAULT_INSTRUMENT.to_dict(), **values})
        except ValueError as e:
            raise RepositoryError(f"Invalid settings: {e}", str(path))

        self._cache = config
        return config

    def save(self, config: InstrumentConfig) -> None:
        """Persist settings."""
        write_json(self._paths.settings_file, config.to_dict())
        self._cache = config

    def clear_cache(self) -> None:
        """Clear cached data."""
        self._cache = None
