"""
Tests for the history log.
"""

import dataclasses

import pytest

from scicalc import HistoryEntry, HistoryLog, OperatorKind


class TestHistoryLog:

    def setup_method(self):
        self.log = HistoryLog()

    def test_empty_log_renders_sentinel(self):
        assert self.log.render_for_display('nothing yet') == 'nothing yet'

    def test_render_newest_first(self):
        self.log.record(HistoryEntry(2, OperatorKind.ADD, 3, 5))
        self.log.record(HistoryEntry(5, OperatorKind.MULTIPLY, 4, 20))
        assert self.log.render_for_display('-') == '5 × 4 = 20\n2 + 3 = 5'

    def test_entries_are_chronological(self):
        first = HistoryEntry(1, OperatorKind.SUBTRACT, 1, 0)
        second = HistoryEntry(0, OperatorKind.DIVIDE, 0, float('inf'))
        self.log.record(first)
        self.log.record(second)
        assert self.log.entries() == (first, second)
        assert len(self.log) == 2

    def test_entry_text_uses_separator(self):
        entry = HistoryEntry(1.5, OperatorKind.DIVIDE, 0, float('inf'))
        assert entry.to_text() == '1,5 ÷ 0 = inf'
        assert entry.to_text('.') == '1.5 ÷ 0 = inf'

    def test_entries_are_immutable(self):
        entry = HistoryEntry(2, OperatorKind.ADD, 3, 5)
        with pytest.raises(dataclasses.FrozenInstanceError):
            entry.result = 6
