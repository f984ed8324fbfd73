from __future__ import annotations

import datetime as dt
from collections.abc import Iterable, Mapping
from decimal import Decimal

from settlements.model import Instruction
from settlements.processing import quantize_money, usd_amount

COLUMNS: tuple[tuple[str, int], ...] = (
    ("Entity", 10),
    ("AgreedFx", 10),
    ("Currency", 10),
    ("Instruction Date", 19),
    ("Settlement Date", 18),
    ("Units", 10),
    ("Price per unit", 16),
    ("Amount in USD", 15),
)

TOTAL_COLUMNS: tuple[tuple[str, int], ...] = (
    ("Settlement Date", 18),
    ("Amount in USD", 15),
)

HEADING_DATE_FORMAT = "%d/%m/%Y"


def _fmt(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, dt.date):
        return value.isoformat()
    return str(value)


def format_row(values: Iterable[object], columns=COLUMNS) -> str:
    """Right-align each value to its column width."""
    return "".join(_fmt(v).rjust(width) for v, (_, width) in zip(values, columns))


def header_row(columns=COLUMNS) -> str:
    return format_row((name for name, _ in columns), columns)


def instruction_cells(instruction: Instruction) -> list[object]:
    return [
        instruction.entity,
        quantize_money(instruction.agreed_fx),
        instruction.currency,
        instruction.instruction_date,
        instruction.settlement_date,
        instruction.units,
        instruction.price_per_unit,
        quantize_money(usd_amount(instruction)),
    ]


def ranking_lines(instructions: Iterable[Instruction]) -> list[str]:
    lines = [header_row()]
    lines.extend(format_row(instruction_cells(i)) for i in instructions)
    return lines


def totals_lines(amount_per_date: Mapping[dt.date, Decimal]) -> list[str]:
    lines = [header_row(TOTAL_COLUMNS)]
    lines.extend(
        format_row((date, quantize_money(amount)), TOTAL_COLUMNS)
        for date, amount in amount_per_date.items()
    )
    return lines


def heading_for_date(label: str, date: dt.date) -> str:
    return f"{label} ON {date.strftime(HEADING_DATE_FORMAT)}:"
