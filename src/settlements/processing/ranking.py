from __future__ import annotations

import bisect
import datetime as dt
from collections import defaultdict
from decimal import Decimal
from typing import Callable

from settlements.model import Instruction

from .money import usd_amount

RankKey = Callable[[Instruction], Decimal]


def usd_amount_descending(instruction: Instruction) -> Decimal:
    """Ordering key: larger USD amounts first.

    Two instructions with the same USD amount share a rank regardless of
    entity or dates. This is the only place that equivalence exists.
    """
    return -usd_amount(instruction)


class RankedBucket:
    """Instructions of one direction, ranked by key, with USD totals per date.

    Duplicates are kept. Equal keys stay in insertion order.
    """

    def __init__(self, key: RankKey = usd_amount_descending) -> None:
        self._key = key
        self._keys: list[Decimal] = []
        self._items: list[Instruction] = []
        self._amount_per_date: defaultdict[dt.date, Decimal] = defaultdict(Decimal)

    def add(self, instruction: Instruction) -> None:
        rank = self._key(instruction)
        pos = bisect.bisect_right(self._keys, rank)
        self._keys.insert(pos, rank)
        self._items.insert(pos, instruction)
        self._amount_per_date[instruction.settlement_date] += usd_amount(instruction)

    def ranked(self) -> tuple[Instruction, ...]:
        return tuple(self._items)

    def on_date(self, date: dt.date) -> tuple[Instruction, ...]:
        return tuple(i for i in self._items if i.settlement_date == date)

    def amount_per_date(self) -> dict[dt.date, Decimal]:
        return dict(sorted(self._amount_per_date.items()))

    def total(self) -> Decimal:
        return sum(self._amount_per_date.values(), Decimal("0"))

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self):
        return iter(self._items)
