from __future__ import annotations

import datetime as dt
from decimal import Decimal

from .instruction import Direction, Instruction


def sample_instructions() -> list[Instruction]:
    """Demo batch used by the CLI when no input files are given."""
    return [
        # outgoing
        Instruction(
            entity="Google",
            direction=Direction.BUY,
            agreed_fx=Decimal("1.11"),
            currency="GBP",
            instruction_date=dt.date(2018, 1, 10),
            settlement_date=dt.date(2018, 1, 15),
            units=9,
            price_per_unit=Decimal("100"),
        ),
        Instruction(
            entity="Yahoo",
            direction=Direction.BUY,
            agreed_fx=Decimal("19.001"),
            currency="AED",
            instruction_date=dt.date(2018, 1, 10),
            settlement_date=dt.date(2018, 6, 20),
            units=2,
            price_per_unit=Decimal("100"),
        ),
        Instruction(
            entity="Asus",
            direction=Direction.BUY,
            agreed_fx=Decimal("1.11"),
            currency="GBP",
            instruction_date=dt.date(2018, 3, 12),
            settlement_date=dt.date(2018, 1, 15),
            units=10,
            price_per_unit=Decimal("100"),
        ),
        # incoming
        Instruction(
            entity="Lego",
            direction=Direction.SELL,
            agreed_fx=Decimal("0.27"),
            currency="SAR",
            instruction_date=dt.date(2018, 3, 12),
            settlement_date=dt.date(2018, 6, 10),
            units=5,
            price_per_unit=Decimal("100"),
        ),
        Instruction(
            entity="Verizon",
            direction=Direction.SELL,
            agreed_fx=Decimal("1"),
            currency="USD",
            instruction_date=dt.date(2018, 5, 15),
            settlement_date=dt.date(2018, 6, 10),
            units=3,
            price_per_unit=Decimal("100"),
        ),
    ]
