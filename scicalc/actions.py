# actions.py
# Python 3.x
# Closed set of logical actions the engine accepts, plus keypad label decoding

from dataclasses import dataclass
from enum import Enum
from typing import Union


class OperatorKind(Enum):
    ADD = '+'
    SUBTRACT = '−'
    MULTIPLY = '×'
    DIVIDE = '÷'

    @property
    def symbol(self) -> str:
        return self.value


class AngleMode(Enum):
    DEGREES = 'deg'
    RADIANS = 'rad'


class ScientificFunction(Enum):
    """Values are the keypad titles."""

    SIN = 'sin'
    COS = 'cos'
    TAN = 'tan'
    ASIN = 'asin'
    ACOS = 'acos'
    ATAN = 'atan'
    SINH = 'sinh'
    COSH = 'cosh'
    TANH = 'tanh'
    LN = 'ln'
    LOG10 = 'log₁₀'
    SQUARE = 'x²'
    CUBE = 'x³'
    SQRT = '√x'
    CBRT = '³√x'
    EXP = 'eˣ'
    POW10 = '10ˣ'
    FACTORIAL = 'x!'


class Constant(Enum):
    E = 'e'
    PI = 'π'


class ActionKind(Enum):
    DIGIT = 'digit'
    DECIMAL_SEPARATOR = 'decimal_separator'
    OPERATOR = 'operator'
    EQUALS = 'equals'
    CLEAR_ALL = 'clear_all'
    MEMORY_CLEAR = 'memory_clear'
    BACKSPACE = 'backspace'
    TOGGLE_SIGN = 'toggle_sign'
    PERCENT = 'percent'
    MEMORY_ADD = 'memory_add'
    MEMORY_SUBTRACT = 'memory_subtract'
    MEMORY_RECALL = 'memory_recall'
    SHOW_HISTORY = 'show_history'
    TOGGLE_ANGLE_MODE = 'toggle_angle_mode'
    SCIENTIFIC_FUNCTION = 'scientific_function'
    INSERT_CONSTANT = 'insert_constant'


_DIGITS = frozenset('0123456789')

Payload = Union[str, OperatorKind, ScientificFunction, Constant, None]

_PAYLOAD_TYPES = {
    ActionKind.DIGIT: str,
    ActionKind.OPERATOR: OperatorKind,
    ActionKind.SCIENTIFIC_FUNCTION: ScientificFunction,
    ActionKind.INSERT_CONSTANT: Constant,
}


class UnknownLabelError(ValueError):
    """Raised when a keypad label does not name any action."""


@dataclass(frozen=True)
class Action:
    kind: ActionKind
    payload: Payload = None

    def __post_init__(self) -> None:
        expected = _PAYLOAD_TYPES.get(self.kind)
        if expected is None:
            if self.payload is not None:
                raise ValueError('{} takes no payload'.format(self.kind.name))
        elif not isinstance(self.payload, expected):
            raise ValueError('{} needs a {} payload, got {!r}'.format(
                self.kind.name, expected.__name__, self.payload))
        if self.kind is ActionKind.DIGIT and self.payload not in _DIGITS:
            raise ValueError('not a digit: {!r}'.format(self.payload))

    @classmethod
    def digit(cls, ch: str) -> 'Action':
        return cls(ActionKind.DIGIT, ch)

    @classmethod
    def operator(cls, kind: OperatorKind) -> 'Action':
        return cls(ActionKind.OPERATOR, kind)

    @classmethod
    def function(cls, fn: ScientificFunction) -> 'Action':
        return cls(ActionKind.SCIENTIFIC_FUNCTION, fn)

    @classmethod
    def constant(cls, c: Constant) -> 'Action':
        return cls(ActionKind.INSERT_CONSTANT, c)

# Keypad titles with no payload
_SIMPLE_LABELS = {
    '=': ActionKind.EQUALS,
    'C': ActionKind.CLEAR_ALL,
    'MC': ActionKind.MEMORY_CLEAR,
    '⌫': ActionKind.BACKSPACE,
    '±': ActionKind.TOGGLE_SIGN,
    '%': ActionKind.PERCENT,
    'M+': ActionKind.MEMORY_ADD,
    'M-': ActionKind.MEMORY_SUBTRACT,
    'MR': ActionKind.MEMORY_RECALL,
    'H': ActionKind.SHOW_HISTORY,
    'Rad': ActionKind.TOGGLE_ANGLE_MODE,
}


def decode_label(label: str, separator: str = ',') -> Action:
    """Map a keypad title onto its action. Unknown titles raise UnknownLabelError."""
    if label in _DIGITS:
        return Action.digit(label)
    if label == separator:
        return Action(ActionKind.DECIMAL_SEPARATOR)
    if label in _SIMPLE_LABELS:
        return Action(_SIMPLE_LABELS[label])
    for enum_type, factory in ((OperatorKind, Action.operator),
                               (Constant, Action.constant),
                               (ScientificFunction, Action.function)):
        try:
            return factory(enum_type(label))
        except ValueError:
            continue
    raise UnknownLabelError('unknown keypad label: {!r}'.format(label))
