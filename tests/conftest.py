"""Shared fixtures for trade journal tests."""

import itertools
from datetime import date

import pytest

from trade_journal.domain.models import Direction, InstrumentConfig, TradeRecord

# One point = one unit of money, no commission: net == exit - entry
ZERO_COST = InstrumentConfig(commission_per_unit=0.0, point_value=1.0, tick_size=0.25)


@pytest.fixture
def zero_cost() -> InstrumentConfig:
    return ZERO_COST


@pytest.fixture
def make_trade():
    """Factory for long trades with a chosen net under ZERO_COST.

    Each call gets an increasing created_at, so trades made in sequence
    on the same day are chronological in call order.
    """
    counter = itertools.count(1)

    def _make(
        net: float,
        day: str | date = "2024-01-02",
        trade_id: str | None = None,
        **kwargs,
    ) -> TradeRecord:
        n = next(counter)
        fields = {
            "id": trade_id or f"t{n}",
            "direction": Direction.LONG,
            "size": 1,
            "entry_price": 1000.0,
            "exit_price": 1000.0 + net,
            "date": day if isinstance(day, date) else date.fromisoformat(day),
            "created_at": float(n),
        }
        fields.update(kwargs)
        return TradeRecord(**fields)

    return _make
