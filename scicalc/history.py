# history.py
# Python 3.x
# Append-only log of completed binary operations

from dataclasses import dataclass
from typing import List, Tuple

from .actions import OperatorKind
from .number_format import format_number


@dataclass(frozen=True)
class HistoryEntry:
    operand1: float
    operator: OperatorKind
    operand2: float
    result: float

    def to_text(self, separator: str = ',') -> str:
        return '{} {} {} = {}'.format(
            format_number(self.operand1, separator),
            self.operator.symbol,
            format_number(self.operand2, separator),
            format_number(self.result, separator),
        )


class HistoryLog:
    """Chronological record; entries are never edited or removed."""

    def __init__(self) -> None:
        self._entries: List[HistoryEntry] = []

    def record(self, entry: HistoryEntry) -> None:
        self._entries.append(entry)

    def entries(self) -> Tuple[HistoryEntry, ...]:
        return tuple(self._entries)

    def render_for_display(self, empty_text: str, separator: str = ',') -> str:
        # Newest first
        if not self._entries:
            return empty_text
        return '\n'.join(e.to_text(separator) for e in reversed(self._entries))

    def __len__(self) -> int:
        return len(self._entries)
