from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from settlements.conv import to_dec


class Direction(Enum):
    """Trade direction from the processing entity's point of view."""

    BUY = "B"  # outgoing cash
    SELL = "S"  # incoming cash

    @classmethod
    def parse(cls, value: str | Direction) -> Direction:
        if isinstance(value, cls):
            return value
        token = value.strip().upper()
        for member in cls:
            if token in (member.value, member.name):
                return member
        raise ValueError(f"Unknown direction {value!r}; expected B, S, BUY or SELL")

    @property
    def is_incoming(self) -> bool:
        return self is Direction.SELL


@dataclass
class Instruction:
    """A settlement instruction as supplied by the caller.

    Every field except `units` may be left as None; the processor's validator
    decides whether the record is complete enough to be accepted.
    """

    entity: str | None = None
    direction: Direction | None = None
    agreed_fx: Decimal | None = None
    currency: str | None = None
    instruction_date: dt.date | None = None
    settlement_date: dt.date | None = None
    units: int | None = 0
    price_per_unit: Decimal | None = None

    def __post_init__(self) -> None:
        if isinstance(self.direction, str):
            self.direction = Direction.parse(self.direction)
        if self.currency is not None:
            self.currency = self.currency.strip().upper()
        self.agreed_fx = _finite_or_none(to_dec(self.agreed_fx))
        self.price_per_unit = _finite_or_none(to_dec(self.price_per_unit))


def _finite_or_none(value: Decimal | None) -> Decimal | None:
    # NaN/Infinity cannot be ranked or summed; treat as missing
    if value is None or not value.is_finite():
        return None
    return value
