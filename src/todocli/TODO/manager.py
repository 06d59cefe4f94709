# TODO/manager.py
import logging
import re
from datetime import date, datetime
from enum import Enum
from typing import Callable, List, Optional, Union

from rich.console import Console
from rich.markup import escape
from rich.text import Text

from todocli.config import DATE_INPUT_FORMAT, Settings, load_settings
from todocli.notifications import notify_task_completed
from todocli.TODO.model import Priority, Task

logger = logging.getLogger(__name__)

_DATE_SHAPE = re.compile(r"^\d{2}/\d{2}/\d{4}$")


class StatusFilter(Enum):
    PENDING = "1"
    COMPLETED = "2"
    ALL = "3"


class SortOption(Enum):
    HIGH_FIRST = "1"
    LOW_FIRST = "2"
    NONE = "3"


def parse_due_date(date_str: str) -> Optional[date]:
    """Parse DD/MM/YYYY; None when the shape or the calendar date is wrong."""
    if not _DATE_SHAPE.match(date_str):
        return None
    try:
        return datetime.strptime(date_str, DATE_INPUT_FORMAT).date()
    except ValueError:
        return None


def _coerce(enum_cls, value):
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        return None


class TodoManager:
    """
    Keeps tasks in insertion order and reports every outcome on a console.

    Expected problems (bad title, unknown priority, bad task number...) are
    printed as messages, never raised. Task numbers given to
    mark_task_as_completed always point into the full, unfiltered list.
    """

    def __init__(self, console: Optional[Console] = None, settings: Optional[Settings] = None):
        self.tasks: List[Task] = []
        self.console = console or Console()
        self.settings = settings or load_settings()

    def _default_action(self, title: str) -> Callable[[], None]:
        def action():
            self.console.print(f"[bold green]🎉 Task '{escape(title)}' completed successfully![/bold green]")
            if self.settings.desktop_notifications:
                notify_task_completed(title)
        return action

    def add_task(
        self,
        title: str,
        priority_label: str,
        completed: bool = False,
        on_complete: Optional[Callable[[], None]] = None,
        due_date: Optional[str] = None,
    ) -> Optional[Task]:
        self.console.print("\n[bold blue]--- Add New Task ---[/bold blue]")
        if not title:
            self.console.print("[red]❌ Title cannot be empty.[/red]")
            logger.debug("rejected task with empty title")
            return None

        priority = Priority.from_label(priority_label)
        if priority is None:
            self.console.print(f"[red]❌ Invalid priority: {escape(priority_label)}.[/red]")
            logger.debug("rejected task %r: unknown priority %r", title, priority_label)
            return None

        parsed_due = None
        if due_date is not None:
            parsed_due = parse_due_date(due_date)
            if parsed_due is None:
                self.console.print(
                    f"[yellow]⚠️ Invalid date format for '{escape(due_date)}'. "
                    f"Due date will not be set.[/yellow]"
                )

        task = Task(
            title=title,
            priority=priority,
            completed=completed,
            on_complete=on_complete or self._default_action(title),
            due_date=parsed_due,
        )
        self.tasks.append(task)
        self.console.print(f"[green]✅ Task '{escape(title)}' added successfully![/green]")
        logger.debug("added task #%d %r", len(self.tasks), task)
        return task

    def list_tasks(
        self,
        status_filter: Union[StatusFilter, str] = StatusFilter.ALL,
        sort_option: Union[SortOption, str] = SortOption.NONE,
    ) -> List[Task]:
        """Print the filtered, sorted tasks and return them in display order."""
        self.console.print("\n[bold blue]--- List Tasks ---[/bold blue]")
        if not self.tasks:
            self.console.print("[yellow]No tasks registered.[/yellow]")
            return []

        chosen_filter = _coerce(StatusFilter, status_filter)
        if chosen_filter is None:
            self.console.print("[yellow]⚠️ Invalid status filter option. Showing all tasks.[/yellow]")
            chosen_filter = StatusFilter.ALL

        chosen_sort = _coerce(SortOption, sort_option)
        if chosen_sort is None:
            self.console.print("[yellow]⚠️ Invalid sort option. Showing tasks in current order.[/yellow]")
            chosen_sort = SortOption.NONE

        if chosen_filter == StatusFilter.PENDING:
            selected = [t for t in self.tasks if not t.completed]
        elif chosen_filter == StatusFilter.COMPLETED:
            selected = [t for t in self.tasks if t.completed]
        else:
            selected = list(self.tasks)

        # sorted() is stable, with and without reverse.
        if chosen_sort == SortOption.HIGH_FIRST:
            selected = sorted(selected, key=lambda t: t.priority.rank)
        elif chosen_sort == SortOption.LOW_FIRST:
            selected = sorted(selected, key=lambda t: t.priority.rank, reverse=True)

        if not selected:
            self.console.print("[yellow]No tasks match the applied filters.[/yellow]")
            return []

        self.console.print("\n[bold cyan]--- Your Tasks ---[/bold cyan]")
        for index, task in enumerate(selected, start=1):
            style = "dim" if task.completed else ""
            self.console.print(Text(f"{index}. {task.summary(self.settings.date_display_format)}", style=style))
        return selected

    def mark_task_as_completed(self, task_number: int) -> bool:
        """Complete the task at 1-based position task_number of the full list."""
        self.console.print("\n[bold blue]--- Mark Task as Completed ---[/bold blue]")
        if not self.tasks:
            self.console.print("[yellow]No tasks to mark as completed.[/yellow]")
            return False

        if not 1 <= task_number <= len(self.tasks):
            self.console.print(f"[red]❌ Invalid task number: {task_number}.[/red]")
            logger.debug("task number %d out of range 1..%d", task_number, len(self.tasks))
            return False

        task = self.tasks[task_number - 1]
        if task.completed:
            self.console.print("[yellow]⚠️ This task is already completed.[/yellow]")
            return False

        task.completed = True
        self.console.print(f"[green]✅ Task '{escape(task.title)}' marked as completed![/green]")
        logger.debug("completed task #%d %r", task_number, task.title)
        task.on_complete()
        return True
