from __future__ import annotations

import csv
import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterable, Literal, Sequence

from settlements.conv import parse_date, to_dec_strict

from .instruction import Direction, Instruction

_HEADER_CLEAN_RE = re.compile(r"[^a-z0-9]")

# normalized header token -> Instruction field
COLUMN_ALIASES: dict[str, str] = {
    "entity": "entity",
    "direction": "direction",
    "type": "direction",
    "buysell": "direction",
    "agreedfx": "agreed_fx",
    "fx": "agreed_fx",
    "currency": "currency",
    "instructiondate": "instruction_date",
    "settlementdate": "settlement_date",
    "units": "units",
    "priceperunit": "price_per_unit",
    "price": "price_per_unit",
}


@dataclass(frozen=True)
class ParseIssue:
    line_no: int
    severity: Literal["warning", "error"]
    message: str
    row_preview: Sequence[str] | None = None


@dataclass
class ParseReport:
    """Non-fatal diagnostics collected while reading instructions."""

    issues: list[ParseIssue] = field(default_factory=list)

    def warn(self, line_no: int, msg: str, row: Sequence[str] | None = None) -> None:
        self.issues.append(ParseIssue(line_no, "warning", msg, row))

    def error(self, line_no: int, msg: str, row: Sequence[str] | None = None) -> None:
        self.issues.append(ParseIssue(line_no, "error", msg, row))

    @property
    def has_errors(self) -> bool:
        return any(i.severity == "error" for i in self.issues)

    def log_with(self, log: logging.Logger) -> None:
        for i in self.issues:
            prefix = "ERROR" if i.severity == "error" else "WARN"
            if i.row_preview is not None:
                log.warning(
                    "%s: line %d: %s | row=%s",
                    prefix,
                    i.line_no,
                    i.message,
                    i.row_preview,
                )
            else:
                log.warning("%s: line %d: %s", prefix, i.line_no, i.message)


def merge_reports(reports: Sequence[ParseReport]) -> ParseReport:
    out = ParseReport()
    for r in reports:
        out.issues.extend(r.issues)
    return out


def _parse_units(raw: str) -> int:
    value = to_dec_strict(raw)
    if value != value.to_integral_value():
        raise ValueError(f"Units must be a whole number: {raw!r}")
    return int(value)


_CONVERTERS: dict[str, Callable[[str], object]] = {
    "entity": lambda raw: raw,
    "direction": Direction.parse,
    "agreed_fx": to_dec_strict,
    "currency": lambda raw: raw.upper(),
    "instruction_date": parse_date,
    "settlement_date": parse_date,
    "units": _parse_units,
    "price_per_unit": to_dec_strict,
}


class InstructionCsvReader:
    """
    Maps CSV rows -> Instruction records (+ ParseReport).

    The first non-empty row is the header. Blank cells become None so that the
    processor rejects the record; cells that fail to convert are reported and
    treated as blank.
    """

    def parse_file(
        self, path: str | Path, *, encoding: str = "utf-8", newline: str = ""
    ) -> tuple[list[Instruction], ParseReport]:
        with open(
            path, "r", encoding=encoding, errors="replace", newline=newline
        ) as fp:
            reader = csv.reader(fp)
            return self.parse_rows(reader)

    def parse_rows(
        self, rows: Iterable[Sequence[str]]
    ) -> tuple[list[Instruction], ParseReport]:
        report = ParseReport()
        instructions: list[Instruction] = []
        columns: list[str | None] | None = None

        for line_no, row in enumerate(rows, start=1):
            if not row or not any((cell or "").strip() for cell in row):
                report.warn(line_no, "Empty row; skipped.")
                continue

            if columns is None:
                columns = self._map_header(line_no, row, report)
                continue

            instructions.append(self._build(line_no, row, columns, report))

        if columns is None:
            report.error(0, "No header row found; nothing to read.")
        elif not [c for c in columns if c is not None]:
            report.error(1, "Header row names no known instruction columns.")
        return instructions, report

    @staticmethod
    def _map_header(
        line_no: int, row: Sequence[str], report: ParseReport
    ) -> list[str | None]:
        columns: list[str | None] = []
        for cell in row:
            token = _HEADER_CLEAN_RE.sub("", (cell or "").lstrip("\ufeff").lower())
            name = COLUMN_ALIASES.get(token)
            if name is None:
                report.warn(line_no, f"Unknown column {cell!r}; ignored.", row)
            elif name in columns:
                report.warn(line_no, f"Duplicate column {cell!r}; ignored.", row)
                name = None
            columns.append(name)
        return columns

    @staticmethod
    def _build(
        line_no: int,
        row: Sequence[str],
        columns: Sequence[str | None],
        report: ParseReport,
    ) -> Instruction:
        if len(row) > len(columns):
            report.warn(line_no, "Row longer than header; extra cells dropped.", row)

        values: dict[str, object] = {"units": None}
        for name, raw in zip(columns, row):
            if name is None:
                continue
            cell = (raw or "").strip()
            if not cell:
                continue
            try:
                values[name] = _CONVERTERS[name](cell)
            except ValueError as e:
                report.warn(line_no, f"Bad value for {name}: {e}", row)
        return Instruction(**values)


def instructions_from_files(
    paths: Sequence[str | Path],
) -> tuple[list[Instruction], ParseReport]:
    """Read several CSV files in order, concatenating instructions and issues."""
    reader = InstructionCsvReader()
    instructions: list[Instruction] = []
    reports = []
    for p in paths:
        items, rep = reader.parse_file(p)
        instructions.extend(items)
        reports.append(rep)
    return instructions, merge_reports(reports)
