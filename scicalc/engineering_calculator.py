# engineering_calculator.py
# Python 3.x
# Scientific functions, constants and angle units on top of Calculator

import logging
import math
from typing import Callable, Dict

from .actions import ActionKind, AngleMode, Constant, ScientificFunction
from .calculator import Calculator

logger = logging.getLogger(__name__)


def _ieee(fn: Callable[[float], float], x: float, overflow: float = math.inf) -> float:
    """Call a math function, mapping its exceptions onto IEEE results."""
    try:
        return fn(x)
    except OverflowError:
        return overflow
    except ValueError:
        return math.nan


def clamp_unit(x: float) -> float:
    if math.isnan(x):
        return x
    return max(-1.0, min(1.0, x))


def cube_root(x: float) -> float:
    if x == 0 or not math.isfinite(x):
        return x
    r = math.copysign(abs(x) ** (1.0 / 3.0), x)
    n = round(r)
    # Snap perfect cubes (27 ** (1/3) is 3.0000000000000004)
    if n ** 3 == x:
        return float(n)
    return r


def float_factorial(x: float) -> float:
    """Factorial of the integer part, as a float product. Below 1 counts as 1."""
    if math.isnan(x):
        return x
    if x < 1:
        return 1.0
    if math.isinf(x):
        return x
    result = 1.0
    for i in range(2, int(x) + 1):
        result *= i
        if math.isinf(result):
            break
    return result


def natural_log(x: float) -> float:
    if x == 0:
        return -math.inf
    return _ieee(math.log, x)


def common_log(x: float) -> float:
    if x == 0:
        return -math.inf
    return _ieee(math.log10, x)


class EngineeringCalculator(Calculator):
    """Engineering functions: trig/inverse trig/hyperbolic/log/powers/roots/x!, e and π"""

    # Angle units
    def _to_radians_if_needed(self, x: float) -> float:
        return x if self.state.angle_mode is AngleMode.RADIANS else math.radians(x)

    def _from_radians_if_needed(self, r: float) -> float:
        return r if self.state.angle_mode is AngleMode.RADIANS else math.degrees(r)

    def _apply(self, name: str, fn: Callable[[float], float]) -> None:
        # Pending operator and first operand are left alone, so this works mid-chain
        x = self.current_value()
        y = fn(x)
        logger.debug('%s(%r) = %r', name, x, y)
        self._set_from_float(y)

    # Constants
    def insert_constant(self, constant: Constant) -> None:
        # Kept as the literal token; parse() resolves it
        self.state.input_text = constant.value

    # Trigonometry
    def sin(self) -> None:
        self._apply('sin', lambda x: _ieee(math.sin, self._to_radians_if_needed(x)))

    def cos(self) -> None:
        self._apply('cos', lambda x: _ieee(math.cos, self._to_radians_if_needed(x)))

    def tan(self) -> None:
        self._apply('tan', lambda x: _ieee(math.tan, self._to_radians_if_needed(x)))

    def asin(self) -> None:
        self._apply('asin', lambda x: self._from_radians_if_needed(math.asin(clamp_unit(x))))

    def acos(self) -> None:
        self._apply('acos', lambda x: self._from_radians_if_needed(math.acos(clamp_unit(x))))

    def atan(self) -> None:
        # The input goes through the angle conversion too
        self._apply('atan', lambda x: self._from_radians_if_needed(
            math.atan(self._to_radians_if_needed(x))))

    # Hyperbolic (angle unit ignored)
    def sinh(self) -> None:
        self._apply('sinh', lambda x: _ieee(math.sinh, x, math.copysign(math.inf, x)))

    def cosh(self) -> None:
        self._apply('cosh', lambda x: _ieee(math.cosh, x))

    def tanh(self) -> None:
        self._apply('tanh', math.tanh)

    # Logarithms
    def ln(self) -> None:
        self._apply('ln', natural_log)

    def log10(self) -> None:
        self._apply('log10', common_log)

    # Powers and roots
    def square(self) -> None:
        self._apply('square', lambda x: x * x)

    def cube(self) -> None:
        self._apply('cube', lambda x: x * x * x)

    def sqrt(self) -> None:
        # Negative input is returned unchanged rather than NaN
        self._apply('sqrt', lambda x: math.sqrt(x) if x >= 0 else x)

    def cbrt(self) -> None:
        self._apply('cbrt', cube_root)

    def exp(self) -> None:
        self._apply('exp', lambda x: _ieee(math.exp, x))

    def pow10(self) -> None:
        self._apply('pow10', lambda x: _ieee(lambda v: math.pow(10.0, v), x))

    def factorial(self) -> None:
        self._apply('factorial', float_factorial)

    # Dispatch
    def _functions(self) -> Dict[ScientificFunction, Callable[[], None]]:
        return {
            ScientificFunction.SIN: self.sin,
            ScientificFunction.COS: self.cos,
            ScientificFunction.TAN: self.tan,
            ScientificFunction.ASIN: self.asin,
            ScientificFunction.ACOS: self.acos,
            ScientificFunction.ATAN: self.atan,
            ScientificFunction.SINH: self.sinh,
            ScientificFunction.COSH: self.cosh,
            ScientificFunction.TANH: self.tanh,
            ScientificFunction.LN: self.ln,
            ScientificFunction.LOG10: self.log10,
            ScientificFunction.SQUARE: self.square,
            ScientificFunction.CUBE: self.cube,
            ScientificFunction.SQRT: self.sqrt,
            ScientificFunction.CBRT: self.cbrt,
            ScientificFunction.EXP: self.exp,
            ScientificFunction.POW10: self.pow10,
            ScientificFunction.FACTORIAL: self.factorial,
        }

    def apply_function(self, fn: ScientificFunction) -> None:
        self._functions()[fn]()

    def _handlers(self) -> Dict[ActionKind, Callable[..., None]]:
        handlers = super()._handlers()
        handlers[ActionKind.SCIENTIFIC_FUNCTION] = self.apply_function
        handlers[ActionKind.INSERT_CONSTANT] = self.insert_constant
        return handlers
