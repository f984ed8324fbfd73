from .csv_reader import (
    InstructionCsvReader,
    ParseReport,
    instructions_from_files,
    merge_reports,
)
from .instruction import Direction, Instruction
from .sample import sample_instructions

__all__ = [
    "Direction",
    "Instruction",
    "InstructionCsvReader",
    "ParseReport",
    "instructions_from_files",
    "merge_reports",
    "sample_instructions",
]
