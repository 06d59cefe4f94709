# TODO/simulation.py
from rich.console import Console

from todocli.TODO.manager import SortOption, StatusFilter, TodoManager


def seed_sample_tasks(manager: TodoManager) -> None:
    """The five starting tasks of the demo. Task #3 starts out completed."""
    console = manager.console
    manager.add_task(
        "Study for the Python exam",
        "High",
        on_complete=lambda: console.print("🎉 Congratulations on finishing this important task!"),
        due_date="28/05/2025",
    )
    manager.add_task(
        "Do the grocery shopping",
        "Medium",
        on_complete=lambda: console.print("🛒 Shopping done, fridge is full!"),
    )
    manager.add_task(
        "Wash the car",
        "Low",
        completed=True,
        on_complete=lambda: console.print("✨ Car shining from the start!"),
    )
    manager.add_task(
        "Pay the electricity and water bills",
        "High",
        on_complete=lambda: console.print("💸 Bills paid, phew!"),
        due_date="25/05/2025",
    )
    manager.add_task(
        "Book a doctor's appointment",
        "Medium",
        on_complete=lambda: console.print("🩺 Appointment booked!"),
        due_date="01/06/2025",
    )


def run_simulation(manager: TodoManager) -> None:
    console: Console = manager.console
    console.print("[bold magenta]--- STARTING SIMULATION ---[/bold magenta]")

    seed_sample_tasks(manager)

    console.print("\n[bold]--- Listing all tasks after adding ---[/bold]")
    manager.list_tasks(StatusFilter.ALL, SortOption.NONE)

    console.print("\n[bold]--- Trying to complete 'Wash the car' (already done) ---[/bold]")
    manager.mark_task_as_completed(3)

    console.print("\n[bold]--- Completing 'Do the grocery shopping' ---[/bold]")
    manager.mark_task_as_completed(2)

    console.print("\n[bold]--- Listing pending tasks (High first) ---[/bold]")
    manager.list_tasks(StatusFilter.PENDING, SortOption.HIGH_FIRST)

    manager.add_task(
        "Prepare the project presentation",
        "High",
        on_complete=lambda: console.print("💻 Presentation ready to impress!"),
        due_date="30/05/2025",
    )

    console.print("\n[bold]--- Listing all tasks after one more add and completion ---[/bold]")
    manager.list_tasks(StatusFilter.ALL, SortOption.NONE)

    console.print("\n[bold magenta]--- SIMULATION FINISHED ---[/bold magenta]")
