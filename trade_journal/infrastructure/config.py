"""Configuration: Centralized paths and settings.

This module provides:
- DataPaths: File paths for the journal store
- ReportConfig: Parameters for report export

Directory Structure:
    <data dir>/
    ├── trades.json          # Trade records (list of objects)
    ├── settings.json        # Instrument settings
    └── reports/             # Exported reports
        ├── journal_report_trades.csv
        └── ...

Instrument economics (commission, point value, tick size) live in
domain.models.InstrumentConfig and are persisted in settings.json.
"""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class DataPaths:
    """File paths for the journal store.

    Attributes:
        root: Data directory
    """

    root: Path = Path(".")

    # --- Files ---

    @property
    def trades_file(self) -> Path:
        """Trade records (JSON)."""
        return self.root / "trades.json"

    @property
    def settings_file(self) -> Path:
        """Instrument settings (JSON)."""
        return self.root / "settings.json"

    # --- Directories ---

    @property
    def reports_dir(self) -> Path:
        """Exported reports."""
        return self.root / "reports"

    def validate(self) -> list[str]:
        """Check which expected paths are missing.

        Returns:
            List of missing paths (empty if all exist)
        """
        missing = []
        if not self.root.exists():
            missing.append(str(self.root))
        if not self.trades_file.exists():
            missing.append(str(self.trades_file))
        return missing

    def ensure_dirs(self) -> None:
        """Create all required directories."""
        self.root.mkdir(parents=True, exist_ok=True)
        self.reports_dir.mkdir(parents=True, exist_ok=True)


@dataclass(frozen=True)
class ReportConfig:
    """Configuration for report export.

    Attributes:
        output_dir: Directory for output files (defaults to paths.reports_dir)
        output_formats: Formats to write ("csv", "parquet", "xlsx")
        days_descending: Order day rollups most recent first
    """

    output_dir: Path | None = None
    output_formats: tuple[str, ...] = ("csv",)
    days_descending: bool = False


# Default instances
DEFAULT_PATHS = DataPaths()
DEFAULT_REPORT_CONFIG = ReportConfig()
