from __future__ import annotations

import datetime as dt
import sys
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from decimal import Decimal
from pathlib import Path
from typing import Protocol, TextIO

from openpyxl import Workbook
from openpyxl.utils import get_column_letter

from settlements.model import Instruction
from settlements.processing import ProcessedBatch, quantize_money, usd_amount

from .table import (
    COLUMNS,
    TOTAL_COLUMNS,
    heading_for_date,
    ranking_lines,
    totals_lines,
)


class ReportSink(Protocol):
    def write(
        self,
        batch: ProcessedBatch,
        *,
        incoming_date: dt.date | None = None,
        outgoing_date: dt.date | None = None,
    ) -> object:
        ...


@dataclass
class TextReportSink:
    """Fixed-width console tables."""

    stream: TextIO = field(default_factory=lambda: sys.stdout)

    def _emit(self, lines: Iterable[str]) -> None:
        for line in lines:
            self.stream.write(line + "\n")

    def write_ranking(self, title: str, instructions: Iterable[Instruction]) -> None:
        self._emit(["", title, ""])
        self._emit(ranking_lines(instructions))

    def write_totals(self, title: str, amount_per_date: Mapping[dt.date, Decimal]) -> None:
        self._emit(["", title, ""])
        self._emit(totals_lines(amount_per_date))

    def write(
        self,
        batch: ProcessedBatch,
        *,
        incoming_date: dt.date | None = None,
        outgoing_date: dt.date | None = None,
    ) -> None:
        self.write_ranking("INCOMING INSTRUCTIONS:", batch.incoming_ranked())
        self.write_ranking("OUTGOING INSTRUCTIONS:", batch.outgoing_ranked())
        self.write_totals("INCOMING USD PER SETTLEMENT DATE:", batch.incoming_by_date())
        self.write_totals("OUTGOING USD PER SETTLEMENT DATE:", batch.outgoing_by_date())
        if incoming_date is not None:
            self.write_ranking(
                heading_for_date("INCOMING INSTRUCTIONS", incoming_date),
                batch.incoming_on(incoming_date),
            )
        if outgoing_date is not None:
            self.write_ranking(
                heading_for_date("OUTGOING INSTRUCTIONS", outgoing_date),
                batch.outgoing_on(outgoing_date),
            )


@dataclass
class ExcelReportSink:
    out_path: Path

    SHEETS = {
        "incoming": "Incoming",
        "outgoing": "Outgoing",
        "incoming_by_date": "Incoming by Date",
        "outgoing_by_date": "Outgoing by Date",
    }

    def write(
        self,
        batch: ProcessedBatch,
        *,
        incoming_date: dt.date | None = None,
        outgoing_date: dt.date | None = None,
    ) -> Path:
        out_path = Path(self.out_path)
        wb = Workbook()

        # Remove the default sheet
        wb.remove(wb.active)

        date_fmt = "YYYY-MM-DD"
        fx_fmt = "0.00"
        usd_fmt = "$#,##0.00"

        def ranking_sheet(title: str, instructions: Iterable[Instruction]) -> None:
            ws = wb.create_sheet(title=title)
            ws.append([name for name, _ in COLUMNS])
            for i in instructions:
                ws.append(
                    [
                        i.entity,
                        float(quantize_money(i.agreed_fx)),
                        i.currency,
                        i.instruction_date,
                        i.settlement_date,
                        i.units,
                        float(i.price_per_unit),
                        float(quantize_money(usd_amount(i))),
                    ]
                )
                r = ws.max_row
                ws.cell(row=r, column=2).number_format = fx_fmt
                ws.cell(row=r, column=4).number_format = date_fmt
                ws.cell(row=r, column=5).number_format = date_fmt
                ws.cell(row=r, column=8).number_format = usd_fmt

        def totals_sheet(title: str, amount_per_date: Mapping[dt.date, Decimal]) -> None:
            ws = wb.create_sheet(title=title)
            ws.append([name for name, _ in TOTAL_COLUMNS])
            for date, amount in amount_per_date.items():
                ws.append([date, float(quantize_money(amount))])
                r = ws.max_row
                ws.cell(row=r, column=1).number_format = date_fmt
                ws.cell(row=r, column=2).number_format = usd_fmt

        ranking_sheet(self.SHEETS["incoming"], batch.incoming_ranked())
        ranking_sheet(self.SHEETS["outgoing"], batch.outgoing_ranked())
        totals_sheet(self.SHEETS["incoming_by_date"], batch.incoming_by_date())
        totals_sheet(self.SHEETS["outgoing_by_date"], batch.outgoing_by_date())
        if incoming_date is not None:
            ranking_sheet(
                f"Incoming {incoming_date.isoformat()}", batch.incoming_on(incoming_date)
            )
        if outgoing_date is not None:
            ranking_sheet(
                f"Outgoing {outgoing_date.isoformat()}", batch.outgoing_on(outgoing_date)
            )

        def autosize(sheet, max_width: int = 40, min_width: int = 10) -> None:
            for col in range(1, sheet.max_column + 1):
                max_len = 0
                for row in range(1, sheet.max_row + 1):
                    v = sheet.cell(row=row, column=col).value
                    if v is None:
                        continue
                    s = v.strftime("%Y-%m-%d") if hasattr(v, "strftime") else str(v)
                    max_len = max(max_len, len(s))
                width = min(max_width, max(min_width, max_len + 2))
                sheet.column_dimensions[get_column_letter(col)].width = width

        for _ws in wb.worksheets:
            autosize(_ws)

        out_path.parent.mkdir(parents=True, exist_ok=True)
        wb.save(out_path)
        return out_path
