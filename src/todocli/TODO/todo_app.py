# TODO/todo_app.py
import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from todocli.TODO.manager import TodoManager
from todocli.TODO.model import Priority
from todocli.TODO.simulation import run_simulation

console = Console()

todo_app = typer.Typer(help="An in-memory ToDo list. Tasks live only as long as the command runs.")

MENU = (
    "[bold]1.[/bold] Add task\n"
    "[bold]2.[/bold] List tasks\n"
    "[bold]3.[/bold] Mark task as completed\n"
    "[bold]4.[/bold] Exit"
)


def prompt_add_task(manager: TodoManager) -> None:
    title = typer.prompt("Title", default="", show_default=False)
    choice = typer.prompt("Priority (1=Low, 2=Medium, 3=High)", type=int)
    priority = Priority.from_index(choice - 1)
    if priority is None:
        manager.console.print(f"[red]❌ Invalid priority option: {choice}.[/red]")
        return
    due = typer.prompt("Due date (DD/MM/YYYY, blank for none)", default="", show_default=False)
    manager.add_task(title, priority.label, due_date=due or None)


def prompt_list_tasks(manager: TodoManager) -> None:
    status_filter = typer.prompt("Filter (1=Pending, 2=Completed, 3=All)", default="3")
    sort_option = typer.prompt("Sort (1=High first, 2=Low first, 3=None)", default="3")
    manager.list_tasks(status_filter, sort_option)


def prompt_complete_task(manager: TodoManager) -> None:
    task_number = typer.prompt("Task number", type=int)
    manager.mark_task_as_completed(task_number)


@todo_app.command("demo")
def demo():
    """Run the sample simulation: add, list, complete and list again."""
    run_simulation(TodoManager(console=console))


@todo_app.command("shell")
def shell():
    """Manage tasks interactively until you choose Exit."""
    manager = TodoManager(console=console)
    actions = {
        "1": prompt_add_task,
        "2": prompt_list_tasks,
        "3": prompt_complete_task,
    }
    while True:
        console.print(Panel.fit(MENU, title="📝 ToDo"))
        choice = typer.prompt("Choose an option").strip()
        if choice == "4":
            console.print("[cyan]Bye! Your tasks are gone with this session.[/cyan]")
            break
        action = actions.get(choice)
        if action is None:
            console.print(f"[yellow]⚠️ Unknown option '{escape(choice)}'. Pick 1-4.[/yellow]")
            continue
        action(manager)


if __name__ == "__main__":
    todo_app()
