from __future__ import annotations

import datetime as dt
import logging
from dataclasses import dataclass
from typing import Protocol

from settlements.model import Instruction

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RejectionEvent:
    position: int  # index in the input sequence
    instruction: Instruction
    missing_fields: tuple[str, ...]


@dataclass(frozen=True)
class AdjustmentEvent:
    currency: str
    regime: str
    original: dt.date
    adjusted: dt.date


class ProcessingObserver(Protocol):
    def instruction_rejected(self, event: RejectionEvent) -> None:  # pragma: no cover - protocol
        ...

    def settlement_adjusted(self, event: AdjustmentEvent) -> None:  # pragma: no cover - protocol
        ...


class LoggingObserver:
    """Default observer: rejections at WARNING, date adjustments at INFO."""

    def __init__(self, log: logging.Logger | None = None) -> None:
        self.log = log or logger

    def instruction_rejected(self, event: RejectionEvent) -> None:
        self.log.warning(
            "Instruction #%d (%s) could not be added; missing: %s",
            event.position,
            getattr(event.instruction, "entity", None) or "<no entity>",
            ", ".join(event.missing_fields),
        )

    def settlement_adjusted(self, event: AdjustmentEvent) -> None:
        self.log.info(
            "Settlement date %s falls on a %s rest day for %s; moved to %s",
            event.original,
            event.regime,
            event.currency,
            event.adjusted,
        )


class EventRecorder:
    """Collect pipeline events without side effects."""

    def __init__(self) -> None:
        self._rejections: list[RejectionEvent] = []
        self._adjustments: list[AdjustmentEvent] = []

    def instruction_rejected(self, event: RejectionEvent) -> None:
        self._rejections.append(event)

    def settlement_adjusted(self, event: AdjustmentEvent) -> None:
        self._adjustments.append(event)

    @property
    def rejections(self) -> list[RejectionEvent]:
        return self._rejections

    @property
    def adjustments(self) -> list[AdjustmentEvent]:
        return self._adjustments

    def clear(self) -> None:
        self._rejections.clear()
        self._adjustments.clear()
