# calculator.py
# Python 3.x
# PEP 8, single-quoted strings

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, Optional

from .actions import Action, ActionKind, AngleMode, OperatorKind
from .history import HistoryEntry, HistoryLog
from .number_format import check_separator, format_number, parse_operand

logger = logging.getLogger(__name__)


@dataclass
class EngineState:
    input_text: str = ''  # '' shows as '0'
    first_operand: Optional[float] = None
    pending_operator: Optional[OperatorKind] = None  # set/cleared with first_operand
    angle_mode: AngleMode = AngleMode.DEGREES
    memory: float = 0.0
    history: HistoryLog = field(default_factory=HistoryLog)


class Calculator:
    """Operation engine: input buffer, left-to-right chaining, memory and history"""

    DECIMAL_SEPARATOR = ','
    RADIANS_PREFIX = 'rad '
    NO_HISTORY_TEXT = 'No calculations yet.'

    def __init__(self, decimal_separator: Optional[str] = None) -> None:
        self.decimal_separator = check_separator(decimal_separator or self.DECIMAL_SEPARATOR)
        self.state = EngineState()

    # Arithmetic
    @staticmethod
    def add(a: float, b: float) -> float:
        return a + b

    @staticmethod
    def subtract(a: float, b: float) -> float:
        return a - b

    @staticmethod
    def multiply(a: float, b: float) -> float:
        return a * b

    @staticmethod
    def divide(a: float, b: float) -> float:
        # Division by zero is +inf whatever the sign of a
        if b == 0:
            return float('inf')
        return a / b

    def apply_op(self, a: float, op: OperatorKind, b: float) -> float:
        if op is OperatorKind.ADD:
            return self.add(a, b)
        if op is OperatorKind.SUBTRACT:
            return self.subtract(a, b)
        if op is OperatorKind.MULTIPLY:
            return self.multiply(a, b)
        return self.divide(a, b)

    # Number text helpers
    def parse(self, text: str) -> float:
        return parse_operand(text, self.decimal_separator)

    def format(self, value: float) -> str:
        return format_number(value, self.decimal_separator)

    def current_value(self) -> float:
        return self.parse(self.state.input_text)

    def _set_from_float(self, value: float) -> None:
        self.state.input_text = self.format(value)

    # Input buffer
    def append_input(self, ch: str) -> None:
        """Append a digit or the separator; a second separator is ignored."""
        s = self.state
        if ch == self.decimal_separator and ch in s.input_text:
            return
        s.input_text += ch

    def input_digit(self, d: str) -> None:
        self.append_input(d)

    def input_separator(self) -> None:
        self.append_input(self.decimal_separator)

    def backspace(self) -> None:
        self.state.input_text = self.state.input_text[:-1]

    def negative_positive(self) -> None:
        self._set_from_float(-self.current_value())

    def percent(self) -> None:
        self._set_from_float(self.current_value() / 100)

    # Chain evaluator
    def set_operator(self, op: OperatorKind) -> None:
        s = self.state
        if s.pending_operator is None:
            s.first_operand = self.current_value()
        elif s.input_text:
            s.first_operand = self._evaluate()
        # Re-pressing an operator with no new digits only swaps the operator
        s.pending_operator = op
        s.input_text = ''

    def equal(self) -> None:
        s = self.state
        if s.pending_operator is None:
            return
        result = self._evaluate()
        s.memory = result
        logger.info('memory <- %s', self.format(result))
        self._set_from_float(result)
        s.first_operand = None
        s.pending_operator = None

    def _evaluate(self) -> float:
        s = self.state
        second = self.current_value()
        result = self.apply_op(s.first_operand, s.pending_operator, second)
        entry = HistoryEntry(s.first_operand, s.pending_operator, second, result)
        s.history.record(entry)
        logger.info('evaluated %s', entry.to_text(self.decimal_separator))
        return result

    # Memory cell
    def memory_add(self) -> None:
        self.state.memory += self.current_value()
        logger.info('memory <- %s', self.format(self.state.memory))
        self._set_from_float(self.state.memory)

    def memory_subtract(self) -> None:
        self.state.memory -= self.current_value()
        logger.info('memory <- %s', self.format(self.state.memory))
        self._set_from_float(self.state.memory)

    def memory_recall(self) -> None:
        self._set_from_float(self.state.memory)

    def memory_clear(self) -> None:
        self.reset()
        self.state.memory = 0.0

    # Clearing and modes
    def reset(self) -> None:
        """Full clear. Memory and history survive."""
        s = self.state
        s.input_text = ''
        s.first_operand = None
        s.pending_operator = None
        s.angle_mode = AngleMode.DEGREES

    def toggle_angle_mode(self) -> None:
        s = self.state
        if s.angle_mode is AngleMode.DEGREES:
            s.angle_mode = AngleMode.RADIANS
        else:
            s.angle_mode = AngleMode.DEGREES

    # Output
    def display_text(self) -> str:
        s = self.state
        prefix = self.RADIANS_PREFIX if s.angle_mode is AngleMode.RADIANS else ''
        if s.pending_operator is not None:
            return '{}{}{}{}'.format(prefix, self.format(s.first_operand),
                                     s.pending_operator.symbol, s.input_text)
        return prefix + (s.input_text or '0')

    def history_text(self) -> str:
        return self.state.history.render_for_display(self.NO_HISTORY_TEXT,
                                                     self.decimal_separator)

    # Action dispatch
    def _handlers(self) -> Dict[ActionKind, Callable[..., None]]:
        return {
            ActionKind.DIGIT: self.input_digit,
            ActionKind.DECIMAL_SEPARATOR: self.input_separator,
            ActionKind.OPERATOR: self.set_operator,
            ActionKind.EQUALS: self.equal,
            ActionKind.CLEAR_ALL: self.reset,
            ActionKind.MEMORY_CLEAR: self.memory_clear,
            ActionKind.BACKSPACE: self.backspace,
            ActionKind.TOGGLE_SIGN: self.negative_positive,
            ActionKind.PERCENT: self.percent,
            ActionKind.MEMORY_ADD: self.memory_add,
            ActionKind.MEMORY_SUBTRACT: self.memory_subtract,
            ActionKind.MEMORY_RECALL: self.memory_recall,
            ActionKind.SHOW_HISTORY: lambda: None,  # read-only, see history_text()
            ActionKind.TOGGLE_ANGLE_MODE: self.toggle_angle_mode,
        }

    def dispatch(self, action: Action) -> str:
        """Handle one action to completion and return the new display text."""
        handler = self._handlers().get(action.kind)
        if handler is None:
            logger.warning('%s not supported by %s', action.kind.name,
                           type(self).__name__)
            return self.display_text()
        logger.debug('action %s %r', action.kind.name, action.payload)
        if action.payload is None:
            handler()
        else:
            handler(action.payload)
        return self.display_text()
