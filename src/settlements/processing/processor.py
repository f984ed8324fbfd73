from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import replace
from typing import Optional

from settlements.model import Instruction

from .batch import ProcessedBatch
from .errors import InvalidArgumentError
from .events import LoggingObserver, ProcessingObserver, RejectionEvent
from .settlement_calendar import SettlementCalendar
from .validator import InstructionValidator

logger = logging.getLogger(__name__)


class InstructionProcessor:
    def __init__(
        self,
        *,
        validator: Optional[InstructionValidator] = None,
        calendar: Optional[SettlementCalendar] = None,
        observer: Optional[ProcessingObserver] = None,
    ) -> None:
        self.observer = observer or LoggingObserver()
        self.validator = validator or InstructionValidator()
        self.calendar = calendar or SettlementCalendar(observer=self.observer)

    def process(self, instructions: Optional[Iterable[Instruction]]) -> ProcessedBatch:
        """Validate, adjust and classify instructions into a new batch.

        Invalid instructions are reported to the observer and left out. The
        caller's instruction objects are never modified; the batch holds
        copies carrying the adjusted settlement date.
        """
        if instructions is None:
            raise InvalidArgumentError("Please provide a valid list of instructions")

        batch = ProcessedBatch()
        for position, instruction in enumerate(instructions):
            missing = self.validator.missing_fields(instruction)
            if missing:
                batch.rejected += 1
                self.observer.instruction_rejected(
                    RejectionEvent(
                        position=position,
                        instruction=instruction,
                        missing_fields=tuple(missing),
                    )
                )
                continue
            batch.add(self._adjusted(instruction))

        logger.debug(
            "Processed batch: %d accepted (%d incoming, %d outgoing), %d rejected",
            batch.accepted,
            len(batch.incoming),
            len(batch.outgoing),
            batch.rejected,
        )
        return batch

    def _adjusted(self, instruction: Instruction) -> Instruction:
        settlement_date = self.calendar.adjust(
            instruction.currency, instruction.settlement_date
        )
        return replace(instruction, settlement_date=settlement_date)


def process(
    instructions: Optional[Iterable[Instruction]],
    *,
    observer: Optional[ProcessingObserver] = None,
) -> ProcessedBatch:
    return InstructionProcessor(observer=observer).process(instructions)
