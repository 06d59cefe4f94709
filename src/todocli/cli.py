import locale
import logging

import typer

from todocli.config import load_settings
from todocli.logging_setup import setup_logging
from todocli.TODO.todo_app import todo_app

logger = logging.getLogger(__name__)

app = typer.Typer()
app.add_typer(todo_app, name="todo", help="Manage your ToDo tasks.")


def adopt_user_locale() -> None:
    """Use the environment's LC_TIME so %x renders dates the user's way."""
    try:
        locale.setlocale(locale.LC_TIME, "")
    except locale.Error:
        logger.warning("unsupported locale in environment, keeping %s", locale.setlocale(locale.LC_TIME))


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logs on stderr.")
):
    settings = load_settings()
    setup_logging(logging.DEBUG if verbose else settings.log_level)
    adopt_user_locale()


if __name__ == "__main__":
    app()
