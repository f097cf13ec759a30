"""Unit tests for interfaces/cli.py.

Tests verify:
1. CLI commands execute without errors
2. Output format is correct
3. Error handling works properly
"""

import json

import pytest

from trade_journal.interfaces.cli import main


def _run(data_dir, *args) -> int:
    return main(["--data-dir", str(data_dir), *args])


class TestCliBasic:
    """Basic CLI tests."""

    def test_version(self, capsys):
        """--version should show version."""
        with pytest.raises(SystemExit) as exc:
            main(["--version"])
        assert exc.value.code == 0

    def test_help(self, capsys):
        """No command should show help."""
        result = main([])
        assert result == 0

    def test_invalid_command(self):
        """Invalid command should fail."""
        with pytest.raises(SystemExit):
            main(["invalid_command"])

    def test_add_help(self):
        """add --help should show options."""
        with pytest.raises(SystemExit) as exc:
            main(["add", "--help"])
        assert exc.value.code == 0


class TestSummaryCommand:
    """Tests for summary / add / delete."""

    def test_summary_empty(self, tmp_path, capsys):
        """Empty journal prints the empty message."""
        assert _run(tmp_path, "summary") == 0
        assert "No trades recorded" in capsys.readouterr().out

    def test_add_then_summary(self, tmp_path, capsys):
        """add stores the trade and summary reports it."""
        result = _run(tmp_path, "add", "--side", "long", "--size", "2",
                      "--entry", "4500", "--exit", "4505", "--date", "2024-01-02")
        assert result == 0
        assert "Added trade" in capsys.readouterr().out

        rows = json.loads((tmp_path / "trades.json").read_text(encoding="utf-8"))
        assert len(rows) == 1
        assert rows[0]["size"] == 2

        assert _run(tmp_path, "summary") == 0
        out = capsys.readouterr().out
        assert "Win rate:        100.0%" in out
        assert "+48.76" in out
        assert "999+" in out

    def test_add_invalid_size(self, tmp_path, capsys):
        """Non-positive size is refused."""
        result = _run(tmp_path, "add", "--side", "short", "--size", "0",
                      "--entry", "4500", "--exit", "4495")
        assert result == 1
        assert "Invalid trade" in capsys.readouterr().out

    def test_delete(self, tmp_path, capsys):
        """delete removes a stored trade."""
        _run(tmp_path, "add", "--side", "long", "--entry", "1", "--exit", "2")
        trade_id = json.loads((tmp_path / "trades.json").read_text())[0]["id"]
        capsys.readouterr()

        assert _run(tmp_path, "delete", trade_id) == 0
        assert f"Deleted trade {trade_id}" in capsys.readouterr().out
        assert json.loads((tmp_path / "trades.json").read_text()) == []

    def test_delete_unknown(self, tmp_path, capsys):
        """Unknown id fails."""
        assert _run(tmp_path, "delete", "nope") == 1
        assert "not found" in capsys.readouterr().out

    def test_corrupt_store(self, tmp_path, capsys):
        """Unreadable trades.json is reported, not raised."""
        (tmp_path / "trades.json").write_text("{broken", encoding="utf-8")
        assert _run(tmp_path, "summary") == 1
        assert "Error" in capsys.readouterr().out


class TestDayCommands:
    """Tests for days / day / equity."""

    @pytest.fixture
    def data_dir(self, tmp_path):
        for side, entry, exit_, day in [
            ("long", "4500", "4506", "2024-01-02"),
            ("short", "4500", "4502", "2024-01-02"),
            ("long", "4500", "4501", "2024-01-03"),
        ]:
            _run(tmp_path, "add", "--side", side, "--entry", entry,
                 "--exit", exit_, "--date", day)
        return tmp_path

    def test_days(self, data_dir, capsys):
        """days lists one line per day, ascending."""
        capsys.readouterr()
        assert _run(data_dir, "days") == 0
        out = capsys.readouterr().out
        assert out.index("2024-01-02") < out.index("2024-01-03")
        assert "50.0%" in out

    def test_days_desc(self, data_dir, capsys):
        """--desc lists most recent first."""
        capsys.readouterr()
        assert _run(data_dir, "days", "--desc") == 0
        out = capsys.readouterr().out
        assert out.index("2024-01-03") < out.index("2024-01-02")

    def test_day(self, data_dir, capsys):
        """day drills into one date."""
        capsys.readouterr()
        assert _run(data_dir, "day", "2024-01-02") == 0
        out = capsys.readouterr().out
        assert "Total trades:    2" in out
        assert "SHORT" in out

    def test_day_missing(self, data_dir, capsys):
        """A day with no trades fails."""
        assert _run(data_dir, "day", "2030-01-01") == 1

    def test_day_bad_date(self, data_dir):
        """Malformed date is an argparse error."""
        with pytest.raises(SystemExit):
            _run(data_dir, "day", "01/02/2024")

    def test_equity(self, data_dir, capsys):
        """equity prints the starting point plus one line per trade."""
        capsys.readouterr()
        assert _run(data_dir, "equity") == 0
        lines = capsys.readouterr().out.strip().splitlines()
        assert len(lines) == 2 + 1 + 3


class TestExportCommand:
    """Tests for export command."""

    def test_export_csv(self, tmp_path, capsys):
        """export writes CSV files into reports/."""
        _run(tmp_path, "add", "--side", "long", "--entry", "1", "--exit", "2")
        assert _run(tmp_path, "export", "-o", "out") == 0
        assert (tmp_path / "reports" / "out_trades.csv").exists()
        assert "Saved:" in capsys.readouterr().out

    def test_export_unknown_format(self, tmp_path, capsys):
        """Unknown format fails cleanly."""
        assert _run(tmp_path, "export", "-f", "pdf") == 1
        assert "Unknown format" in capsys.readouterr().out


class TestSettingsCommand:
    """Tests for settings command."""

    def test_show_defaults(self, tmp_path, capsys):
        """No flags prints the current settings."""
        assert _run(tmp_path, "settings") == 0
        out = capsys.readouterr().out
        assert "Commission/unit: 0.62" in out
        assert not (tmp_path / "settings.json").exists()

    def test_update(self, tmp_path, capsys):
        """Flags are saved to settings.json."""
        assert _run(tmp_path, "settings", "--point-value", "50") == 0
        assert "Settings saved." in capsys.readouterr().out
        saved = json.loads((tmp_path / "settings.json").read_text(encoding="utf-8"))
        assert saved["point_value"] == 50.0
        assert saved["commission_per_unit"] == 0.62

    def test_invalid(self, tmp_path, capsys):
        """Out-of-range values fail cleanly."""
        assert _run(tmp_path, "settings", "--tick-size", "0") == 1
        assert "Error:" in capsys.readouterr().out
