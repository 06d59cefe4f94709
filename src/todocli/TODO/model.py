# TODO/model.py
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Callable, Optional


class Priority(Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"

    @classmethod
    def from_label(cls, label: str) -> Optional["Priority"]:
        """Exact, case-sensitive lookup by display label."""
        for priority in cls:
            if priority.value == label:
                return priority
        return None

    @classmethod
    def from_index(cls, index: int) -> Optional["Priority"]:
        """0-based lookup in declaration order (Low, Medium, High)."""
        members = list(cls)
        if 0 <= index < len(members):
            return members[index]
        return None

    @property
    def label(self) -> str:
        return self.value

    @property
    def rank(self) -> int:
        """Position in PRIORITY_RANKING; lower means more urgent."""
        return PRIORITY_RANKING.index(self)


# Most urgent first. Both sort modes read this list.
PRIORITY_RANKING = [Priority.HIGH, Priority.MEDIUM, Priority.LOW]


def _no_action() -> None:
    return None


@dataclass
class Task:
    title: str
    priority: Priority
    completed: bool = False
    on_complete: Callable[[], None] = _no_action
    due_date: Optional[date] = None

    def __post_init__(self):
        if not self.title:
            raise ValueError("Task title cannot be empty")

    def summary(self, date_format: str = "%x") -> str:
        """One-line description used by the task listing."""
        status = "✅ Done" if self.completed else "⏳ Pending"
        due = f" (Due: {self.due_date.strftime(date_format)})" if self.due_date else ""
        return f"[{status}] {self.title} (Priority: {self.priority.label}){due}"

    def __repr__(self):
        return (f"Task(title='{self.title}', priority='{self.priority.label}', "
                f"completed={self.completed}, due_date='{self.due_date}')")
