import pytest

from scicalc import decode_label


def _press(calc, *labels):
    """Feed keypad labels through the boundary decoder; return the last display."""
    display = calc.display_text()
    for label in labels:
        display = calc.dispatch(decode_label(label, calc.decimal_separator))
    return display


@pytest.fixture
def press():
    return _press
