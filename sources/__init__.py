from sources.base import TerminalVoltage, FieldVoltage
from sources.infinite_bus import InfiniteBus
from sources.field import ConstantField, StepField

__all__ = [
    "TerminalVoltage",
    "FieldVoltage",
    "InfiniteBus",
    "ConstantField",
    "StepField",
]
