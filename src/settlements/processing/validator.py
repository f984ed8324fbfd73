from __future__ import annotations

from decimal import Decimal

from settlements.model import Instruction

REQUIRED_FIELDS = (
    "entity",
    "direction",
    "agreed_fx",
    "currency",
    "instruction_date",
    "settlement_date",
    "units",
    "price_per_unit",
)


def _absent(value: object) -> bool:
    # NaN/Infinity count as absent: they cannot be ranked or summed
    return value is None or (isinstance(value, Decimal) and not value.is_finite())


class InstructionValidator:
    """Presence checks only; values such as zero or negative units are accepted."""

    def is_valid(self, instruction: Instruction) -> bool:
        return not self.missing_fields(instruction)

    def missing_fields(self, instruction: Instruction) -> list[str]:
        return [
            name
            for name in REQUIRED_FIELDS
            if _absent(getattr(instruction, name, None))
        ]
