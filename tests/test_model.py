"""Tests for todocli.TODO.model."""

from __future__ import annotations

from datetime import date

import pytest

from todocli.TODO.model import PRIORITY_RANKING, Priority, Task


class TestPriority:
    """Tests for the Priority enum."""

    def test_from_label_exact_match(self) -> None:
        """Labels resolve to their member."""
        assert Priority.from_label("Low") is Priority.LOW
        assert Priority.from_label("Medium") is Priority.MEDIUM
        assert Priority.from_label("High") is Priority.HIGH

    def test_from_label_is_case_sensitive(self) -> None:
        """No case folding or aliases."""
        assert Priority.from_label("high") is None
        assert Priority.from_label("HIGH") is None
        assert Priority.from_label(" High") is None
        assert Priority.from_label("Invalid") is None

    def test_from_index(self) -> None:
        """Index follows declaration order."""
        assert Priority.from_index(0) is Priority.LOW
        assert Priority.from_index(1) is Priority.MEDIUM
        assert Priority.from_index(2) is Priority.HIGH

    def test_from_index_out_of_range(self) -> None:
        """Out-of-range indexes give None instead of raising."""
        assert Priority.from_index(-1) is None
        assert Priority.from_index(3) is None

    def test_rank_follows_ranking(self) -> None:
        """High ranks before Medium, Medium before Low."""
        assert PRIORITY_RANKING == [Priority.HIGH, Priority.MEDIUM, Priority.LOW]
        assert Priority.HIGH.rank < Priority.MEDIUM.rank < Priority.LOW.rank

    def test_label(self) -> None:
        """Display label is the raw value."""
        assert Priority.MEDIUM.label == "Medium"


class TestTask:
    """Tests for the Task dataclass."""

    def test_defaults(self) -> None:
        """New tasks are pending with no due date."""
        task = Task(title="Write report", priority=Priority.LOW)
        assert task.completed is False
        assert task.due_date is None
        assert task.on_complete() is None

    def test_empty_title_rejected(self) -> None:
        """An empty title is never stored."""
        with pytest.raises(ValueError):
            Task(title="", priority=Priority.HIGH)

    def test_summary_pending(self) -> None:
        """Pending summary without a due date."""
        task = Task(title="Buy milk", priority=Priority.MEDIUM)
        assert task.summary() == "[⏳ Pending] Buy milk (Priority: Medium)"

    def test_summary_done_with_due_date(self) -> None:
        """Completed summary shows the formatted due date."""
        task = Task(
            title="Pay bills",
            priority=Priority.HIGH,
            completed=True,
            due_date=date(2025, 5, 25),
        )
        assert task.summary("%d/%m/%Y") == "[✅ Done] Pay bills (Priority: High) (Due: 25/05/2025)"
