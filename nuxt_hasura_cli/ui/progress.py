"""Spinner feedback for long-running setup steps."""

from collections.abc import Iterator
from contextlib import contextmanager

from rich.markup import escape

from nuxt_hasura_cli.utils.console import console
from nuxt_hasura_cli.utils.logging import log_message


@contextmanager
def step_status(message: str, success: str | None = None) -> Iterator[None]:
    """Show a spinner while the block runs, then a check mark or a cross.

    Exceptions propagate unchanged after the failure line is printed.

    Args:
        message: Text shown next to the spinner, e.g. "Installing dependencies"
        success: Text printed on success (defaults to "<message> - Complete!")
    """
    log_message(f"Step started: {message}")
    try:
        with console.status(f"[step]{escape(message)}...[/step]", spinner="dots"):
            yield
    except BaseException:
        console.print(f"[error]✖[/error] [red]{escape(message)} - Failed![/red]")
        log_message(f"Step failed: {message}")
        raise
    console.print(f"[success]✔[/success] [green]{escape(success or f'{message} - Complete!')}[/green]")
    log_message(f"Step finished: {message}")


__all__ = [
    "step_status",
]
