from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field
from decimal import Decimal

from settlements.model import Direction, Instruction

from .ranking import RankedBucket


@dataclass
class ProcessedBatch:
    """Instructions accepted by one processing run, split by cash direction.

    Incoming holds SELL instructions, outgoing holds BUY instructions. Every
    read accessor returns a fresh copy.
    """

    incoming: RankedBucket = field(default_factory=RankedBucket)
    outgoing: RankedBucket = field(default_factory=RankedBucket)
    accepted: int = 0
    rejected: int = 0

    def bucket_for(self, direction: Direction) -> RankedBucket:
        return self.incoming if direction.is_incoming else self.outgoing

    def add(self, instruction: Instruction) -> None:
        self.bucket_for(instruction.direction).add(instruction)
        self.accepted += 1

    def incoming_ranked(self) -> tuple[Instruction, ...]:
        return self.incoming.ranked()

    def outgoing_ranked(self) -> tuple[Instruction, ...]:
        return self.outgoing.ranked()

    def incoming_by_date(self) -> dict[dt.date, Decimal]:
        return self.incoming.amount_per_date()

    def outgoing_by_date(self) -> dict[dt.date, Decimal]:
        return self.outgoing.amount_per_date()

    def incoming_on(self, date: dt.date) -> tuple[Instruction, ...]:
        return self.incoming.on_date(date)

    def outgoing_on(self, date: dt.date) -> tuple[Instruction, ...]:
        return self.outgoing.on_date(date)

    @property
    def is_empty(self) -> bool:
        return not self.incoming and not self.outgoing
