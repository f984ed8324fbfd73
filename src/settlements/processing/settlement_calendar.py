from __future__ import annotations

import calendar
import datetime as dt
from dataclasses import dataclass
from typing import Mapping

from .events import AdjustmentEvent, LoggingObserver, ProcessingObserver


@dataclass(frozen=True)
class Regime:
    """Trading-week convention: the first working weekday and the rest days."""

    name: str
    week_start: int  # datetime.weekday() numbering, Monday == 0
    rest_days: frozenset[int]

    def is_rest_day(self, date: dt.date) -> bool:
        return date.weekday() in self.rest_days

    def next_week_start(self, date: dt.date) -> dt.date:
        """Next occurrence of week_start strictly after date."""
        days = (self.week_start - date.weekday()) % 7 or 7
        return date + dt.timedelta(days=days)


WESTERN = Regime(
    name="western",
    week_start=calendar.MONDAY,
    rest_days=frozenset({calendar.SATURDAY, calendar.SUNDAY}),
)
MIDDLE_EAST = Regime(
    name="middle-east",
    week_start=calendar.SUNDAY,
    rest_days=frozenset({calendar.FRIDAY, calendar.SATURDAY}),
)

DEFAULT_REGIMES: dict[str, Regime] = {
    "AED": MIDDLE_EAST,
    "SAR": MIDDLE_EAST,
}


class SettlementCalendar:
    """Moves settlement dates that land on a currency's rest day.

    Currencies not listed in `regimes` use `default`.
    """

    def __init__(
        self,
        *,
        regimes: Mapping[str, Regime] | None = None,
        default: Regime = WESTERN,
        observer: ProcessingObserver | None = None,
    ) -> None:
        source = DEFAULT_REGIMES if regimes is None else regimes
        self.regimes = {ccy.upper(): regime for ccy, regime in source.items()}
        self.default = default
        self.observer = observer or LoggingObserver()

    def regime_for(self, currency: str) -> Regime:
        return self.regimes.get(currency.upper(), self.default)

    def adjust(self, currency: str, settlement_date: dt.date) -> dt.date:
        regime = self.regime_for(currency)
        if not regime.is_rest_day(settlement_date):
            return settlement_date

        adjusted = regime.next_week_start(settlement_date)
        self.observer.settlement_adjusted(
            AdjustmentEvent(
                currency=currency.upper(),
                regime=regime.name,
                original=settlement_date,
                adjusted=adjusted,
            )
        )
        return adjusted
