# logging_setup.py
import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(level: int = logging.WARNING) -> None:
    """
    Send log records to stderr through rich.

    Console messages meant for the user are printed separately; this only
    carries diagnostics. Safe to call more than once.
    """
    root = logging.getLogger()
    root.setLevel(level)

    for h in list(root.handlers):
        root.removeHandler(h)

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    root.addHandler(handler)

    logging.captureWarnings(True)
