"""
Rank and aggregate a batch of settlement instructions and print the report.

Usage
-----
    # Built-in sample batch
    python -m settlements.cmd.cli -v

    # Instructions from CSV, with date-filtered tables and an Excel copy
    python -m settlements.cmd.cli \
        --incoming-date 2018-06-10 \
        --outgoing-date 2018-01-15 \
        --output ./report.xlsx \
        /path/to/instructions.csv

Instruction CSV schema:
    entity,direction,agreed_fx,currency,instruction_date,settlement_date,units,price_per_unit
    Google,B,1.11,GBP,2018-01-10,2018-01-15,9,100
"""

from __future__ import annotations

import argparse
import datetime as dt
import logging
import sys
from decimal import ROUND_HALF_UP, getcontext
from pathlib import Path

from settlements.conv import parse_date
from settlements.logging import configure_logging
from settlements.model import instructions_from_files, sample_instructions
from settlements.processing import InstructionProcessor
from settlements.reporting import ExcelReportSink, TextReportSink

# Display rounding; usd_amount widens precision locally and stays exact
getcontext().prec = 28
getcontext().rounding = ROUND_HALF_UP


def _date_arg(value: str) -> dt.date:
    try:
        return parse_date(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid date {value!r}: {e}") from e


def run(args: argparse.Namespace) -> int:
    logger = logging.getLogger(__name__)

    if args.input:
        logger.info("Reading %d file(s): %s", len(args.input), ", ".join(args.input))
        instructions, report = instructions_from_files(args.input)
        report.log_with(logger)
        if report.has_errors:
            logger.error("Input could not be read; see errors above.")
            return 2
    else:
        logger.info("No input files given; using the built-in sample batch.")
        instructions = sample_instructions()

    batch = InstructionProcessor().process(instructions)
    logger.info(
        "Processed %d instruction(s): %d incoming, %d outgoing, %d rejected",
        batch.accepted + batch.rejected,
        len(batch.incoming),
        len(batch.outgoing),
        batch.rejected,
    )

    TextReportSink(stream=sys.stdout).write(
        batch, incoming_date=args.incoming_date, outgoing_date=args.outgoing_date
    )

    if args.output:
        try:
            out_path = ExcelReportSink(out_path=Path(args.output)).write(
                batch,
                incoming_date=args.incoming_date,
                outgoing_date=args.outgoing_date,
            )
        except Exception as e:
            logger.exception("Failed to write workbook: %s", e)
            raise
        logger.info("Wrote workbook to %s", out_path)
    return 0


def build_argparser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        description="Rank settlement instructions by USD amount and total them per date"
    )
    p.add_argument(
        "input",
        type=str,
        nargs="*",
        help="Instruction CSV paths; the built-in sample batch is used when omitted",
    )
    p.add_argument(
        "--incoming-date",
        type=_date_arg,
        default=None,
        help="Also list incoming instructions settling on this date (YYYY-MM-DD)",
    )
    p.add_argument(
        "--outgoing-date",
        type=_date_arg,
        default=None,
        help="Also list outgoing instructions settling on this date (YYYY-MM-DD)",
    )
    p.add_argument(
        "--output",
        type=str,
        default=None,
        help="Optional .xlsx path for a workbook copy of the report",
    )
    p.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase verbosity: -v (INFO), -vv (DEBUG)",
    )
    return p


def main(argv: list[str] | None = None) -> int:
    parser = build_argparser()
    args = parser.parse_args(argv)

    verbosity_map = {
        0: logging.WARNING,  # Default: quiet
        1: logging.INFO,  # -v: informational
        2: logging.DEBUG,  # -vv and above: debug
    }
    level = verbosity_map.get(min(args.verbose, 2), logging.WARNING)
    configure_logging(level=level)

    return run(args)


if __name__ == "__main__":
    sys.exit(main())
