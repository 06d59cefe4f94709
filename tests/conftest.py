"""Shared fixtures for todocli tests."""

from __future__ import annotations

import io
from collections.abc import Callable

import pytest
from rich.console import Console

from todocli.config import Settings
from todocli.TODO.manager import TodoManager


@pytest.fixture
def console() -> Console:
    """A plain-text console writing into memory."""
    return Console(file=io.StringIO(), width=200, color_system=None, force_terminal=False)


@pytest.fixture
def settings() -> Settings:
    """Settings with a locale-independent date format."""
    return Settings(date_display_format="%d/%m/%Y")


@pytest.fixture
def manager(console: Console, settings: Settings) -> TodoManager:
    """An empty manager reporting to the in-memory console."""
    return TodoManager(console=console, settings=settings)


@pytest.fixture
def output(console: Console) -> Callable[[], str]:
    """Return everything printed on the console so far."""
    return lambda: console.file.getvalue()
