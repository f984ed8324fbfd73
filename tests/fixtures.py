"""Instruction builders for tests.

`make_instruction` fills every field with a valid default so each test only
spells out what it is about.
"""

from __future__ import annotations

import datetime as dt
from decimal import Decimal

from settlements.model import Direction, Instruction

# 2024-01-01 is a Monday
MONDAY = dt.date(2024, 1, 1)
WEDNESDAY = dt.date(2024, 1, 3)
THURSDAY = dt.date(2024, 1, 4)
FRIDAY = dt.date(2024, 1, 5)
SATURDAY = dt.date(2024, 1, 6)
SUNDAY = dt.date(2024, 1, 7)
NEXT_MONDAY = dt.date(2024, 1, 8)
NEXT_SUNDAY = dt.date(2024, 1, 14)


def make_instruction(
    *,
    entity="ACME",
    direction=Direction.BUY,
    agreed_fx=Decimal("1"),
    currency="USD",
    instruction_date=dt.date(2023, 12, 28),
    settlement_date=WEDNESDAY,
    units=1,
    price_per_unit=Decimal("100"),
) -> Instruction:
    return Instruction(
        entity=entity,
        direction=direction,
        agreed_fx=agreed_fx,
        currency=currency,
        instruction_date=instruction_date,
        settlement_date=settlement_date,
        units=units,
        price_per_unit=price_per_unit,
    )
