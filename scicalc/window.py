# window.py
# Python 3.x, PyQt5
# Keypad window: button title -> Action -> EngineeringCalculator

import argparse
import logging
import sys

from PyQt5.QtCore import Qt
from PyQt5.QtGui import QFont
from PyQt5.QtWidgets import (
    QApplication,
    QWidget,
    QGridLayout,
    QVBoxLayout,
    QPushButton,
    QLineEdit,
    QMessageBox,
)

from .actions import ActionKind, UnknownLabelError, decode_label
from .engineering_calculator import EngineeringCalculator
from .number_format import check_separator

logger = logging.getLogger(__name__)

HISTORY_TITLE = 'History'

SCIENTIFIC_ROWS = [
    ['Rad',  'H',    'MC',   'M+',  'M-',    'MR'],
    ['sin',  'cos',  'tan',  'asin', 'acos', 'atan'],
    ['sinh', 'cosh', 'tanh', 'ln',  'log₁₀', 'x!'],
    ['x²',   'x³',   '√x',   '³√x', 'eˣ',    '10ˣ'],
]


def basic_rows(separator):
    return [
        ['C', '⌫', '±', '%', '÷', 'π'],
        ['7', '8', '9', '×', 'e'],
        ['4', '5', '6', '−'],
        ['1', '2', '3', '+'],
        ['0', separator, '='],
    ]


def setup_logger(log_path='scicalc.log', level='INFO'):
    """Console and UTF-8 file logging for the scicalc package."""
    logger = logging.getLogger('scicalc')
    if logger.handlers:
        return logger

    logger.setLevel(level)
    formatter = logging.Formatter(
        fmt='%(asctime)s %(levelname)s %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    sh = logging.StreamHandler(sys.stdout)
    sh.setFormatter(formatter)
    logger.addHandler(sh)

    fh = logging.FileHandler(log_path, mode='a', encoding='utf-8')
    fh.setFormatter(formatter)
    logger.addHandler(fh)

    return logger


class EngineeringCalculatorWindow(QWidget):
    """Scientific keypad UI; all logic lives in the engine"""

    def __init__(self, engine=None) -> None:
        super().__init__()
        self.engine = engine or EngineeringCalculator()
        self._build_ui()

    def _build_ui(self) -> None:
        self.setWindowTitle('Scientific Calculator')
        root = QVBoxLayout()
        root.setContentsMargins(12, 12, 12, 12)
        root.setSpacing(8)
        self.setLayout(root)

        self.display = QLineEdit()
        self.display.setReadOnly(True)
        self.display.setAlignment(Qt.AlignRight)
        font = QFont(self.display.font())
        font.setPointSize(26)
        self.display.setFont(font)
        self.display.setText(self.engine.display_text())
        root.addWidget(self.display)

        grid = QGridLayout()
        grid.setSpacing(6)
        root.addLayout(grid)

        rows = SCIENTIFIC_ROWS + basic_rows(self.engine.decimal_separator)
        for r, row in enumerate(rows):
            for c, label in enumerate(row):
                btn = QPushButton(label)
                btn.setMinimumHeight(48)
                btn.setCursor(Qt.PointingHandCursor)
                # clicked emits checked(bool); absorb it
                btn.clicked.connect(lambda checked=False, ch=label: self.on_button(ch))
                grid.addWidget(btn, r, c)

        self.resize(480, 560)

    def on_button(self, label: str) -> None:
        try:
            action = decode_label(label, self.engine.decimal_separator)
        except UnknownLabelError:
            logger.warning('ignored keypad label %r', label)
            return

        self.engine.dispatch(action)
        if action.kind is ActionKind.SHOW_HISTORY:
            QMessageBox.information(self, HISTORY_TITLE, self.engine.history_text())
        self.display.setText(self.engine.display_text())


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description='Scientific calculator with chained (left-to-right) evaluation.'
    )
    parser.add_argument('--separator', default=EngineeringCalculator.DECIMAL_SEPARATOR,
                        help='decimal separator character (default: ",")')
    parser.add_argument('--log', default='scicalc.log',
                        help='log file path (default: scicalc.log)')
    parser.add_argument('--log-level', default='INFO',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='log level (default: INFO)')
    args = parser.parse_args(argv)
    try:
        check_separator(args.separator)
    except ValueError as e:
        parser.error(str(e))
    taken = {label for row in SCIENTIFIC_ROWS + basic_rows('') for label in row}
    if args.separator in taken:
        parser.error('--separator must not be used by another key')
    return args


def main(argv=None) -> None:
    args = parse_args(argv)
    setup_logger(args.log, args.log_level)
    app = QApplication(sys.argv[:1])
    w = EngineeringCalculatorWindow(EngineeringCalculator(args.separator))
    w.show()
    sys.exit(app.exec())


if __name__ == '__main__':
    main()
