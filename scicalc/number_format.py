# number_format.py
# Python 3.x
# Numeric text <-> float with a locale decimal separator

import math

DISPLAY_PRECISION = 15  # significant digits shown for results
CANONICAL_POINT = '.'

# Characters float() reads or format_number() emits; none can be the separator
RESERVED_CHARS = frozenset('0123456789+-._eEiInNfFaAtTyY')

# Constant tokens stay literal in the buffer and resolve only when parsed
CONSTANTS = {
    'e': math.e,
    'π': math.pi,
}


def check_separator(separator: str) -> str:
    """Return the separator, or raise ValueError if it would clash with number text."""
    if (len(separator) != 1 or separator in RESERVED_CHARS
            or separator in CONSTANTS or separator.isspace()):
        raise ValueError('unusable decimal separator: {!r}'.format(separator))
    return separator


def parse_operand(text: str, separator: str = ',') -> float:
    """Buffer text to float. Unparseable text is 0, never an error."""
    if text in CONSTANTS:
        return CONSTANTS[text]
    try:
        return float(text.replace(separator, CANONICAL_POINT))
    except ValueError:
        return 0.0


def format_number(value: float, separator: str = ',') -> str:
    """General format with DISPLAY_PRECISION significant digits.

    Values with more significant digits do not survive a round trip through
    the buffer: after 1234567890123456 + 0 = the buffer reads back as
    1234567890123460 while memory and history keep the exact result.
    """
    s = '{:.{}g}'.format(value, DISPLAY_PRECISION)
    return s.replace(CANONICAL_POINT, separator)


def canonicalize(text: str, separator: str = ',') -> str:
    """Display form of well-formed numeric text (e.g. '007,50' -> '7,5')."""
    return format_number(parse_operand(text, separator), separator)
