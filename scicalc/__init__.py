"""
scicalc - scientific calculator engine with chained evaluation.

Actions go in through ``EngineeringCalculator.dispatch``; the display string
and the history text come out. The PyQt5 keypad in ``scicalc.window`` is
one presentation layer on top of it.
"""

from .actions import (
    Action,
    ActionKind,
    AngleMode,
    Constant,
    OperatorKind,
    ScientificFunction,
    UnknownLabelError,
    decode_label,
)
from .calculator import Calculator, EngineState
from .engineering_calculator import EngineeringCalculator
from .history import HistoryEntry, HistoryLog
from .number_format import canonicalize, format_number, parse_operand

__version__ = '1.0.0'

__all__ = [
    'Action',
    'ActionKind',
    'AngleMode',
    'Calculator',
    'Constant',
    'EngineState',
    'EngineeringCalculator',
    'HistoryEntry',
    'HistoryLog',
    'OperatorKind',
    'ScientificFunction',
    'UnknownLabelError',
    'canonicalize',
    'decode_label',
    'format_number',
    'parse_operand',
]
