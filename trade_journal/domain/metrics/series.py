"""Time series for the equity curve and the per-trade bar chart.

Two different views of the same chronological outcomes:

- Equity series: cumulative net, starting at 0, one point per trade.
  equity[-1] equals Stats.total_net.
- Drawdown series: the raw signed net of each trade in time order.
  Despite the name this is not a running drawdown line; the renderer
  draws it as green/red bars to show trade-to-trade volatility.
  The scalar max drawdown lives in Stats.
"""

from typing import Iterable

from trade_journal.domain.commission import evaluate_trades, sort_chronologically
from trade_journal.domain.models import DEFAULT_INSTRUMENT, InstrumentConfig, TradeRecord


def build_equity_series(
    records: Iterable[TradeRecord],
    config: InstrumentConfig = DEFAULT_INSTRUMENT,
) -> list[float]:
    """Cumulative net after each trade, oldest first.

    Args:
        records: Trade records in any order
        config: Instrument economics

    Returns:
        List of length n + 1 (n valid trades) starting with 0.0

    Example:
        >>> build_equity_series([])
        [0.0]
    """
    equity = [0.0]
    for outcome in sort_chronologically(evaluate_trades(records, config)):
        equity.append(equity[-1] + outcome.net)
    return equity


def build_drawdown_series(
    records: Iterable[TradeRecord],
    config: InstrumentConfig = DEFAULT_INSTRUMENT,
) -> list[float]:
    """Signed net of each trade, oldest first (empty for no trades)."""
    return [
        outcome.net
        for outcome in sort_chronologically(evaluate_trades(records, config))
    ]
