import datetime as dt

import pytest

from fixtures import (
    FRIDAY,
    MONDAY,
    NEXT_MONDAY,
    SATURDAY,
    SUNDAY,
    THURSDAY,
    WEDNESDAY,
)
from settlements.processing import (
    MIDDLE_EAST,
    WESTERN,
    EventRecorder,
    Regime,
    SettlementCalendar,
)


def _calendar(**kwargs):
    recorder = EventRecorder()
    return SettlementCalendar(observer=recorder, **kwargs), recorder


@pytest.mark.parametrize("currency", ["USD", "GBP", "EUR", "JPY"])
@pytest.mark.parametrize("rest_day", [SATURDAY, SUNDAY])
def test_western_rest_days_move_to_next_monday(currency, rest_day):
    cal, _ = _calendar()
    assert cal.adjust(currency, rest_day) == NEXT_MONDAY


@pytest.mark.parametrize("currency", ["AED", "SAR", "aed"])
@pytest.mark.parametrize("rest_day", [FRIDAY, SATURDAY])
def test_middle_east_rest_days_move_to_next_sunday(currency, rest_day):
    cal, _ = _calendar()
    assert cal.adjust(currency, rest_day) == SUNDAY


@pytest.mark.parametrize("day", [MONDAY, WEDNESDAY, THURSDAY, FRIDAY])
def test_western_working_days_unchanged(day):
    cal, recorder = _calendar()
    assert cal.adjust("GBP", day) == day
    assert recorder.adjustments == []


@pytest.mark.parametrize("day", [SUNDAY, MONDAY, WEDNESDAY, THURSDAY])
def test_middle_east_working_days_unchanged(day):
    cal, _ = _calendar()
    assert cal.adjust("AED", day) == day


@pytest.mark.parametrize("currency", ["USD", "GBP", "AED", "SAR"])
def test_adjust_is_idempotent_over_four_weeks(currency):
    cal, _ = _calendar()
    start = dt.date(2024, 2, 1)
    for offset in range(28):
        day = start + dt.timedelta(days=offset)
        once = cal.adjust(currency, day)
        assert cal.adjust(currency, once) == once
        assert once >= day
        assert (once - day).days < 3


def test_adjustment_reports_event():
    cal, recorder = _calendar()
    cal.adjust("sar", SATURDAY)

    [event] = recorder.adjustments
    assert event.currency == "SAR"
    assert event.regime == MIDDLE_EAST.name
    assert event.original == SATURDAY
    assert event.adjusted == SUNDAY


def test_regime_lookup_and_custom_table():
    cal, _ = _calendar()
    assert cal.regime_for("AED") is MIDDLE_EAST
    assert cal.regime_for("usd") is WESTERN

    custom, _ = _calendar(regimes={"ils": MIDDLE_EAST})
    assert custom.regime_for("ILS") is MIDDLE_EAST
    assert custom.regime_for("AED") is WESTERN


def test_regime_next_week_start_is_strictly_after():
    assert WESTERN.next_week_start(MONDAY) == NEXT_MONDAY
    assert MIDDLE_EAST.next_week_start(SATURDAY) == SUNDAY
    assert MIDDLE_EAST.is_rest_day(FRIDAY) is True
    assert WESTERN.is_rest_day(FRIDAY) is False


def test_custom_default_regime():
    six_day_week = Regime(name="six-day", week_start=0, rest_days=frozenset({6}))
    cal, _ = _calendar(regimes={}, default=six_day_week)
    assert cal.adjust("AED", SATURDAY) == SATURDAY
    assert cal.adjust("AED", SUNDAY) == NEXT_MONDAY
