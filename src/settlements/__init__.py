"""Settlement instruction processing: validate, adjust, rank and aggregate."""

from .model import Direction, Instruction
from .processing import InvalidArgumentError, ProcessedBatch, process

__all__ = [
    "Direction",
    "Instruction",
    "InvalidArgumentError",
    "ProcessedBatch",
    "process",
]
