from .batch import ProcessedBatch
from .errors import InvalidArgumentError
from .events import (
    AdjustmentEvent,
    EventRecorder,
    LoggingObserver,
    ProcessingObserver,
    RejectionEvent,
)
from .money import quantize_money, usd_amount
from .processor import InstructionProcessor, process
from .ranking import RankedBucket, usd_amount_descending
from .settlement_calendar import (
    MIDDLE_EAST,
    WESTERN,
    Regime,
    SettlementCalendar,
)
from .validator import InstructionValidator

__all__ = [
    "AdjustmentEvent",
    "EventRecorder",
    "InstructionProcessor",
    "InstructionValidator",
    "InvalidArgumentError",
    "LoggingObserver",
    "MIDDLE_EAST",
    "ProcessedBatch",
    "ProcessingObserver",
    "RankedBucket",
    "Regime",
    "RejectionEvent",
    "SettlementCalendar",
    "WESTERN",
    "process",
    "quantize_money",
    "usd_amount",
    "usd_amount_descending",
]
