"""Domain Models: Core data structures for the trade journal.

These models represent the fundamental business entities:
- Direction: Enum for trade direction
- TradeRecord: One closed trade as logged by the user
- InstrumentConfig: Contract economics (commission, point value, tick size)

Design Principles:
- Immutable (frozen dataclass)
- Structural validation in __post_init__
- Derived money values are never stored, they are recomputed per call
"""

from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Any


class Direction(str, Enum):
    """Trade direction."""

    LONG = "long"
    SHORT = "short"

    @property
    def sign(self) -> int:
        """+1 for long, -1 for short."""
        return 1 if self is Direction.LONG else -1


def _parse_date(value: Any, field_name: str) -> date:
    """Parse a YYYY-MM-DD string (or pass through a date)."""
    if isinstance(value, date):
        return value
    if not value:
        raise ValueError(f"{field_name} cannot be empty")
    try:
        return date.fromisoformat(str(value)[:10])
    except ValueError:
        raise ValueError(f"{field_name} must be YYYY-MM-DD format, got: {value}")


def _to_float(value: Any) -> float:
    """Parse a stored number; damaged values become NaN."""
    try:
        return float(value)
    except (TypeError, ValueError):
        return math.nan


def _optional_float(value: Any) -> float | None:
    if value is None or value == "":
        return None
    return _to_float(value)


@dataclass(frozen=True, slots=True)
class TradeRecord:
    """One closed trade.

    Only base fields are stored. Points, money result and win/loss
    are derived by ``domain.commission`` on every computation.

    Numeric fields are not checked here: a damaged record can still be
    represented, and the analytics skip it instead of failing the batch.

    Attributes:
        id: Stable identifier (editing/deletion only)
        direction: Direction.LONG or Direction.SHORT
        size: Number of contracts
        entry_price: Fill price on entry
        exit_price: Fill price on exit
        date: Trading day the trade belongs to
        stop_price: Planned stop (optional)
        target_price: Planned target (optional)
        created_at: Insertion order marker for same-day ordering (optional)
        note: Free text
        setup_tag: Setup label
        attachment_ref: Screenshot file reference

    Example:
        >>> trade = TradeRecord(
        ...     id="1", direction=Direction.LONG, size=2,
        ...     entry_price=4500.0, exit_price=4505.0,
        ...     date=date(2024, 1, 2),
        ... )
    """

    id: str
    direction: Direction
    size: int
    entry_price: float
    exit_price: float
    date: date
    stop_price: float | None = None
    target_price: float | None = None
    created_at: float | None = None
    note: str | None = None
    setup_tag: str | None = None
    attachment_ref: str | None = None

    def __post_init__(self) -> None:
        """Validate structural fields after initialization."""
        if not self.id:
            raise ValueError("id cannot be empty")
        if not isinstance(self.direction, Direction):
            raise ValueError(f"direction must be a Direction, got: {self.direction!r}")
        if not isinstance(self.date, date):
            raise ValueError(f"date must be a date, got: {self.date!r}")

    @property
    def is_long(self) -> bool:
        return self.direction is Direction.LONG

    @property
    def risk_distance(self) -> float | None:
        """Distance from entry to stop, None when no usable stop is set."""
        if self.stop_price is None:
            return None
        distance = abs(self.entry_price - self.stop_price)
        if not math.isfinite(distance) or distance <= 0:
            return None
        return distance

    def replace(self, **changes: Any) -> TradeRecord:
        """Return an edited copy of this record."""
        return dataclasses.replace(self, **changes)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TradeRecord:
        """Build a record from its persisted JSON shape.

        Accepts the snake_case shape written by ``to_dict`` and the legacy
        camelCase shape (``isLong``, ``contracts``, ``entryPrice``, ...).
        Stored derived fields (points, result, isWin) are ignored.

        Raises:
            ValueError: If a required field is missing or malformed
        """
        try:
            if "direction" in data:
                direction = Direction(str(data["direction"]).lower())
            else:
                direction = Direction.LONG if data["isLong"] else Direction.SHORT

            size = data["size"] if "size" in data else data["contracts"]
            entry = _to_float(data["entry_price"] if "entry_price" in data else data["entryPrice"])
            exit_ = _to_float(data["exit_price"] if "exit_price" in data else data["exitPrice"])
        except KeyError as e:
            raise ValueError(f"missing field: {e.args[0]}")

        return cls(
            id=str(data.get("id") or ""),
            direction=direction,
            size=size,
            entry_price=entry,
            exit_price=exit_,
            date=_parse_date(data.get("date"), "date"),
            stop_price=_optional_float(data.get("stop_price", data.get("stopPrice"))),
            target_price=_optional_float(data.get("target_price", data.get("targetPrice"))),
            created_at=_optional_float(data.get("created_at", data.get("createdAt"))),
            note=data.get("note") or None,
            setup_tag=data.get("setup_tag", data.get("setup")) or None,
            attachment_ref=data.get("attachment_ref", data.get("screenshot")) or None,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to the persisted JSON shape."""
        return {
            "id": self.id,
            "direction": self.direction.value,
            "size": self.size,
            "entry_price": self.entry_price,
            "exit_price": self.exit_price,
            "date": self.date.isoformat(),
            "stop_price": self.stop_price,
            "target_price": self.target_price,
            "created_at": self.created_at,
            "note": self.note,
            "setup_tag": self.setup_tag,
            "attachment_ref": self.attachment_ref,
        }


@dataclass(frozen=True, slots=True)
class InstrumentConfig:
    """Contract economics used to turn points into money.

    Attributes:
        commission_per_unit: Round-turn commission per contract (>= 0)
        point_value: Money value of one full point per contract (> 0)
        tick_size: Minimum price increment (> 0)

    Defaults are the Micro E-mini S&P 500 (MES).
    """

    commission_per_unit: float = 0.62
    point_value: float = 5.0
    tick_size: float = 0.25

    def __post_init__(self) -> None:
        for name in ("commission_per_unit", "point_value", "tick_size"):
            value = getattr(self, name)
            if not isinstance(value, (int, float)) or not math.isfinite(value):
                raise ValueError(f"{name} must be a finite number, got: {value!r}")
        if self.commission_per_unit < 0:
            raise ValueError(
                f"commission_per_unit must be non-negative, got: {self.commission_per_unit}"
            )
        if self.point_value <= 0:
            raise ValueError(f"point_value must be positive, got: {self.point_value}")
        if self.tick_size <= 0:
            raise ValueError(f"tick_size must be positive, got: {self.tick_size}")

    def to_dict(self) -> dict[str, float]:
        return {
            "commission_per_unit": self.commission_per_unit,
            "point_value": self.point_value,
            "tick_size": self.tick_size,
        }


DEFAULT_INSTRUMENT = InstrumentConfig()
