"""Terminal notifications for the command-line host"""

from __future__ import annotations

import time
from typing import Awaitable, Callable, TypeVar

import click

from commento.application.host import Notifier

T = TypeVar("T")


class ConsoleNotifier(Notifier):
    """Writes errors and progress to stderr"""

    def __init__(self):
        self.errors: list[str] = []

    def show_error(self, message: str) -> None:
        self.errors.append(message)
        click.secho(f"ERROR: {message}", fg="red", err=True)

    async def with_progress(
        self, title: str, task: Callable[[], Awaitable[T]], cancellable: bool = True
    ) -> T:
        hint = " (Ctrl+C to cancel)" if cancellable else ""
        click.echo(f"{title}{hint}", err=True)
        started = time.monotonic()
        try:
            return await task()
        finally:
            click.echo(f"Finished in {time.monotonic() - started:.1f}s", err=True)
