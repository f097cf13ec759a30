"""Statistics Engine: Reduce a trade collection to a Stats summary.

Metrics:
- Win rate, average win / average loss
- Profit factor (capped at PROFIT_FACTOR_CAP when there are no losses)
- Expectancy = P(win) × avg_win − (1 − P(win)) × avg_loss
- Max drawdown of the cumulative net curve
- Best / worst trade, best single day
- Current streak (signed: + wins, − losses)
- Average risk:reward

Every call recomputes from the records' base fields. Nothing is cached,
so the same function serves the whole journal and a single day.

Degenerate cases never produce NaN or Infinity:
- Empty input → EMPTY_STATS (all zero)
- No losses → profit factor PROFIT_FACTOR_CAP
- No risk-defined trades → risk:reward falls back to avg_win / avg_loss
"""

from __future__ import annotations

import math
from collections import defaultdict
from dataclasses import asdict, dataclass
from typing import Iterable, Sequence

from trade_journal.domain.commission import (
    TradeOutcome,
    evaluate_trades,
    sort_chronologically,
)
from trade_journal.domain.models import DEFAULT_INSTRUMENT, InstrumentConfig, TradeRecord

PROFIT_FACTOR_CAP = 999.0


# =============================================================================
# Data Classes
# =============================================================================

@dataclass(frozen=True, slots=True)
class Stats:
    """Scalar performance summary.

    Attributes:
        total_trades: Valid trades considered (wins + losses + scratches)
        win_count: Trades with net > 0
        loss_count: Trades with net < 0
        scratch_count: Trades with net == 0
        win_rate: win_count / total_trades × 100
        avg_win: Mean net of wins
        avg_loss: Absolute mean net of losses
        total_net: Sum of net amounts
        total_points: Sum of signed points
        profit_factor: Gross wins / |gross losses|
        expectancy: Probability-weighted net per trade
        max_drawdown: Largest peak-to-trough decline of cumulative net (>= 0)
        best_trade: Highest single net
        worst_trade: Lowest single net
        current_streak: Signed length of the most recent win/loss run
        best_day: Largest per-day sum of winning trades
        avg_risk_reward: Average reward/risk ratio
    """
    total_trades: int
    win_count: int
    loss_count: int
    scratch_count: int
    win_rate: float
    avg_win: float
    avg_loss: float
    total_net: float
    total_points: float
    profit_factor: float
    expectancy: float
    max_drawdown: float
    best_trade: float
    worst_trade: float
    current_streak: int
    best_day: float
    avg_risk_reward: float

    @property
    def is_empty(self) -> bool:
        return self.total_trades == 0

    @property
    def profit_factor_capped(self) -> bool:
        """True when profit factor is the no-loss sentinel."""
        return self.profit_factor == PROFIT_FACTOR_CAP

    def to_dict(self) -> dict:
        """Convert to dictionary for DataFrame creation."""
        return asdict(self)


EMPTY_STATS = Stats(
    total_trades=0,
    win_count=0,
    loss_count=0,
    scratch_count=0,
    win_rate=0.0,
    avg_win=0.0,
    avg_loss=0.0,
    total_net=0.0,
    total_points=0.0,
    profit_factor=0.0,
    expectancy=0.0,
    max_drawdown=0.0,
    best_trade=0.0,
    worst_trade=0.0,
    current_streak=0,
    best_day=0.0,
    avg_risk_reward=0.0,
)


# =============================================================================
# Component Metrics
# =============================================================================

def calculate_max_drawdown(net_amounts: Sequence[float]) -> float:
    """Largest decline from a running peak of the cumulative curve.

    The curve starts at 0, so the starting balance counts as a peak.

    Args:
        net_amounts: Net results in chronological order

    Returns:
        Max drawdown (>= 0)

    Example:
        >>> calculate_max_drawdown([100, -50, 100, -50])
        50.0
    """
    cumulative = 0.0
    peak = 0.0
    max_dd = 0.0
    for net in net_amounts:
        cumulative += net
        if cumulative > peak:
            peak = cumulative
        drawdown = peak - cumulative
        if drawdown > max_dd:
            max_dd = drawdown
    return max_dd


def _outcome_sign(outcome: TradeOutcome) -> int:
    if outcome.is_win:
        return 1
    if outcome.is_loss:
        return -1
    return 0


def calculate_current_streak(recent_first: Sequence[TradeOutcome]) -> int:
    """Signed length of the run that includes the most recent trade.

    A scratch ends a run. If the most recent trade is a scratch the
    streak is 0.

    Args:
        recent_first: Outcomes ordered most recent first

    Returns:
        +n for n consecutive wins, -n for n consecutive losses
    """
    if not recent_first:
        return 0

    sign = _outcome_sign(recent_first[0])
    if sign == 0:
        return 0

    length = 0
    for outcome in recent_first:
        if _outcome_sign(outcome) != sign:
            break
        length += 1
    return sign * length


def calculate_best_day(outcomes: Iterable[TradeOutcome]) -> float:
    """Largest per-day sum of winning trades (0 when there are no wins)."""
    per_day: dict = defaultdict(float)
    for outcome in outcomes:
        if outcome.is_win:
            per_day[outcome.date] += outcome.net
    return max(per_day.values(), default=0.0)


def floor_to_tenth(value: float) -> float:
    """Floor to one decimal place.

    The product is rounded to 9 places first so that float noise such as
    2.9999999999999996 floors to 3.0 rather than 2.9.
    Values too large to scale are returned unchanged.
    """
    scaled = round(value * 10, 9)
    if not math.isfinite(scaled):
        return value
    return math.floor(scaled) / 10


def calculate_average_risk_reward(
    outcomes: Sequence[TradeOutcome],
    avg_win: float,
    avg_loss: float,
) -> float:
    """Average reward/risk across trades with a usable stop.

    Per trade:
        risk   = |entry - stop|
        reward = |target - entry| if a target is set, else |points|
        ratio  = floor_to_tenth(reward / risk)

    Each ratio is floored before averaging. A ratio that overflows to
    infinity is left out. When no trade has a stop,
    falls back to avg_win / avg_loss (0 if avg_loss is 0).
    """
    ratios = []
    for outcome in outcomes:
        record = outcome.record
        risk = record.risk_distance
        if risk is None:
            continue
        if record.target_price is not None and math.isfinite(record.target_price):
            reward = abs(record.target_price - record.entry_price)
        else:
            reward = abs(outcome.points)
        ratio = reward / risk
        if not math.isfinite(ratio):
            continue
        ratios.append(floor_to_tenth(ratio))

    if ratios:
        # mean of terms divided first; a plain sum can overflow
        return sum(r / len(ratios) for r in ratios)
    if avg_loss == 0:
        return 0.0
    ratio = avg_win / avg_loss
    return ratio if math.isfinite(ratio) else 0.0


# =============================================================================
# Summary
# =============================================================================

def summarize_outcomes(outcomes: Sequence[TradeOutcome]) -> Stats:
    """Build Stats from already-evaluated outcomes."""
    if not outcomes:
        return EMPTY_STATS

    total = len(outcomes)
    wins = [o.net for o in outcomes if o.is_win]
    losses = [o.net for o in outcomes if o.is_loss]
    scratch_count = total - len(wins) - len(losses)

    win_rate = len(wins) / total * 100
    avg_win = sum(wins) / len(wins) if wins else 0.0
    avg_loss = abs(sum(losses) / len(losses)) if losses else 0.0

    gross_wins = sum(wins)
    gross_losses = abs(sum(losses))
    if gross_losses > 0:
        profit_factor = gross_wins / gross_losses
    elif wins:
        profit_factor = PROFIT_FACTOR_CAP
    else:
        profit_factor = 0.0

    prob_win = len(wins) / total
    prob_loss = 1 - prob_win
    expectancy = prob_win * avg_win - prob_loss * avg_loss

    ordered = sort_chronologically(outcomes)
    nets = [o.net for o in outcomes]

    return Stats(
        total_trades=total,
        win_count=len(wins),
        loss_count=len(losses),
        scratch_count=scratch_count,
        win_rate=win_rate,
        avg_win=avg_win,
        avg_loss=avg_loss,
        total_net=sum(nets),
        total_points=sum(o.points for o in outcomes),
        profit_factor=profit_factor,
        expectancy=expectancy,
        max_drawdown=calculate_max_drawdown([o.net for o in ordered]),
        best_trade=max(nets),
        worst_trade=min(nets),
        current_streak=calculate_current_streak(ordered[::-1]),
        best_day=calculate_best_day(outcomes),
        avg_risk_reward=calculate_average_risk_reward(outcomes, avg_win, avg_loss),
    )


def summarize(
    records: Iterable[TradeRecord],
    config: InstrumentConfig = DEFAULT_INSTRUMENT,
) -> Stats:
    """Reduce a collection of trade records to a Stats summary.

    Invalid records (non-finite prices, non-positive size) are skipped.

    Args:
        records: Trade records in any order
        config: Instrument economics

    Returns:
        Stats, or EMPTY_STATS when no valid record remains

    Example:
        >>> stats = summarize(trades)
        >>> stats.win_rate, stats.profit_factor
    """
    return summarize_outcomes(evaluate_trades(records, config))
