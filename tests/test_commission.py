"""Unit tests for domain/commission.py.

Tests verify:
1. Points, gross, commission and net for long and short trades
2. Invalid input returns None instead of raising
3. Chronological ordering and its tie-break chain
"""

import math
from datetime import date

import pytest

from trade_journal.domain.commission import (
    TradeOutcome,
    chronological_key,
    compute_trade_result,
    evaluate_trade,
    evaluate_trades,
    sort_chronologically,
)
from trade_journal.domain.models import DEFAULT_INSTRUMENT, Direction, TradeRecord


# =============================================================================
# compute_trade_result Tests
# =============================================================================

class TestComputeTradeResult:
    """Tests for the commission model."""

    def test_long_winner(self):
        """Long 4500 → 4505, 2 contracts at MES economics."""
        r = compute_trade_result(Direction.LONG, 4500, 4505, 2, 0.62, 5)
        assert r.points == 5.0
        assert r.gross == 50.0
        assert r.commission == pytest.approx(1.24)
        assert r.net == pytest.approx(48.76)
        assert r.is_win is True

    def test_short_winner(self):
        """Short profits when exit < entry."""
        r = compute_trade_result(Direction.SHORT, 4510.0, 4505.0, 1, 0.62, 5)
        assert r.points == 5.0
        assert r.gross == 25.0
        assert r.net == pytest.approx(24.38)

    def test_long_loser(self):
        """Losing long has negative points and net."""
        r = compute_trade_result(Direction.LONG, 4500.0, 4498.0, 1, 0.62, 5)
        assert r.points == -2.0
        assert r.net == pytest.approx(-10.62)
        assert r.is_loss is True
        assert r.is_win is False

    def test_ticks(self):
        """Ticks are points over tick size."""
        r = compute_trade_result(Direction.LONG, 4500.0, 4501.25, 1, 0.62, 5, 0.25)
        assert r.ticks == 5.0

    def test_commission_turns_flat_trade_into_loss(self):
        """Zero points with commission is a loss, not a scratch."""
        r = compute_trade_result(Direction.LONG, 4500.0, 4500.0, 1, 0.62, 5)
        assert r.net == pytest.approx(-0.62)
        assert r.is_loss is True

    def test_scratch(self):
        """Net exactly zero is neither a win nor a loss."""
        r = compute_trade_result(Direction.LONG, 4500.0, 4500.0, 1, 0.0, 5)
        assert r.net == 0
        assert r.is_scratch is True
        assert r.is_win is False
        assert r.is_loss is False

    def test_commission_proportional_to_size(self):
        """Commission scales linearly with size."""
        one = compute_trade_result(Direction.LONG, 4500.0, 4505.0, 1, 0.62, 5)
        ten = compute_trade_result(Direction.LONG, 4500.0, 4505.0, 10, 0.62, 5)
        assert ten.commission == pytest.approx(one.commission * 10)

    def test_defaults_are_reference_instrument(self):
        """Defaults use DEFAULT_INSTRUMENT."""
        r = compute_trade_result(Direction.LONG, 4500.0, 4501.0, 1)
        assert r.gross == DEFAULT_INSTRUMENT.point_value
        assert r.commission == DEFAULT_INSTRUMENT.commission_per_unit

    @pytest.mark.parametrize(
        "entry, exit_, size",
        [
            (math.nan, 4500.0, 1),
            (4500.0, math.inf, 1),
            (4500.0, -math.inf, 1),
            (4500.0, 4505.0, 0),
            (4500.0, 4505.0, -1),
            (4500.0, 4505.0, 1.5),
            (4500.0, 4505.0, True),
            ("4500", 4505.0, 1),
        ],
    )
    def test_invalid_input(self, entry, exit_, size):
        """Non-finite prices or bad size return None."""
        assert compute_trade_result(Direction.LONG, entry, exit_, size) is None

    def test_negative_commission_invalid(self):
        """Negative commission rate returns None."""
        assert compute_trade_result(Direction.LONG, 1.0, 2.0, 1, -1.0, 5) is None

    def test_overflowing_result_invalid(self):
        """Finite prices whose money result overflows return None."""
        assert compute_trade_result(Direction.LONG, -1e308, 1e308, 1) is None
        assert compute_trade_result(Direction.LONG, 0.0, 1e308, 10, 0.0, 5) is None


# =============================================================================
# evaluate_trades Tests
# =============================================================================

class TestEvaluateTrades:
    """Tests for record evaluation."""

    def test_evaluate_trade(self, make_trade, zero_cost):
        """Outcome carries the record and its result."""
        record = make_trade(30)
        outcome = evaluate_trade(record, zero_cost)
        assert isinstance(outcome, TradeOutcome)
        assert outcome.record is record
        assert outcome.net == 30.0
        assert outcome.is_win is True

    def test_invalid_dropped_order_kept(self, make_trade, zero_cost):
        """Invalid records are skipped, order of the rest preserved."""
        a = make_trade(10)
        bad = make_trade(5, entry_price=math.nan)
        b = make_trade(-5)
        zero_size = make_trade(5, size=0)
        outcomes = evaluate_trades([a, bad, b, zero_size], zero_cost)
        assert [o.record.id for o in outcomes] == [a.id, b.id]

    def test_empty(self):
        """Empty input gives empty output."""
        assert evaluate_trades([]) == []


# =============================================================================
# Chronological Ordering Tests
# =============================================================================

def _plain(trade_id: str, day: str, created_at: float | None = None) -> TradeRecord:
    return TradeRecord(
        id=trade_id, direction=Direction.LONG, size=1,
        entry_price=1.0, exit_price=2.0,
        date=date.fromisoformat(day), created_at=created_at,
    )


class TestChronologicalOrder:
    """Tests for chronological_key and sort_chronologically."""

    def test_date_first(self):
        """Date dominates every tie-break."""
        early = _plain("b", "2024-01-01", created_at=99.0)
        late = _plain("a", "2024-01-02", created_at=1.0)
        assert chronological_key(early) < chronological_key(late)

    def test_created_at_breaks_ties(self):
        """Same day: created_at decides."""
        first = _plain("z", "2024-01-02", created_at=1.0)
        second = _plain("a", "2024-01-02", created_at=2.0)
        assert chronological_key(first) < chronological_key(second)

    def test_numeric_id_fallback(self):
        """Without created_at, numeric ids compare numerically."""
        first = _plain("900", "2024-01-02")
        second = _plain("1000", "2024-01-02")
        assert chronological_key(first) < chronological_key(second)

    def test_created_at_and_timestamp_id_interleave(self):
        """created_at and timestamp ids are compared on one timeline."""
        legacy = _plain("1704200000500", "2024-01-02")
        logged = _plain("x", "2024-01-02", created_at=1704200000000.0)
        later = _plain("y", "2024-01-02", created_at=1704200001000.0)
        assert chronological_key(logged) < chronological_key(legacy) < chronological_key(later)

    def test_lexical_id_last(self):
        """Non-numeric ids sort after numeric markers, then lexically."""
        numeric = _plain("5", "2024-01-02")
        alpha = _plain("abc", "2024-01-02")
        beta = _plain("abd", "2024-01-02")
        assert chronological_key(numeric) < chronological_key(alpha) < chronological_key(beta)

    def test_sort_descending(self, make_trade, zero_cost):
        """descending=True returns most recent first."""
        a = make_trade(1, "2024-01-01")
        b = make_trade(2, "2024-01-03")
        c = make_trade(3, "2024-01-02")
        outcomes = evaluate_trades([a, b, c], zero_cost)
        assert [o.record.id for o in sort_chronologically(outcomes)] == [a.id, c.id, b.id]
        assert [o.record.id for o in sort_chronologically(outcomes, descending=True)] == [
            b.id, c.id, a.id,
        ]
