"""Terminal output for create-nuxt-hasura-cli.

Status helpers take plain text. Messages often carry paths or a tool's
stderr, so they are escaped before Rich renders the level prefix around them.
"""

from rich.console import Console
from rich.markup import escape
from rich.theme import Theme

from nuxt_hasura_cli import SCRIPT_NAME, __version__
from nuxt_hasura_cli.utils.logging import log_message

custom_theme = Theme(
    {
        "error": "bold red",
        "success": "bold green",
        "warning": "bold yellow",
        "info": "bold blue",
        "header": "bold magenta",
        "step": "bold cyan",
    }
)

console = Console(theme=custom_theme)
console_err = Console(theme=custom_theme, stderr=True)

# level -> (prefix label, message colour)
_LEVELS = {
    "error": ("ERROR", "red"),
    "success": ("SUCCESS", "green"),
    "warning": ("WARNING", "yellow"),
    "info": ("INFO", "cyan"),
}

BANNER = r"""
[bold green]  _  _             _     _  _
 | \| |_  ___ __ | |_  | || |__ _ ____  _ _ _ __ _
 | .` | || \ \ /  |  _| | __ / _` (_-< || | '_/ _` |
 |_|\_|\_,_/_\_\   \__| |_||_\__,_/__/\_,_|_| \__,_|
[/bold green]
[bold cyan]Nuxt + Hasura GraphQL scaffolding[/bold cyan]
[white]Version {version}[/white]
"""


def _emit(level: str, message: str) -> None:
    label, colour = _LEVELS[level]
    target = console_err if level == "error" else console
    target.print(f"[{level}]\\[{label}][/{level}] [{colour}]{escape(message)}[/{colour}]")
    log_message(f"{label}: {message}")


def print_error(message: str) -> None:
    """Print an error line on stderr."""
    _emit("error", message)


def print_success(message: str) -> None:
    _emit("success", message)


def print_warning(message: str) -> None:
    _emit("warning", message)


def print_info(message: str) -> None:
    _emit("info", message)


def print_header(title: str) -> None:
    """Print a section title with a blank line on each side."""
    console.print()
    console.print(f"[header]=== {escape(title)} ===[/header]")
    console.print()


def print_step(message: str) -> None:
    console.print(f"[step]➜[/step] {escape(message)}")


def show_banner() -> None:
    console.print(BANNER.format(version=__version__))


def show_version() -> None:
    """Print the version and the tools the generated projects rely on."""
    console.print(f"[bold]{SCRIPT_NAME}[/bold] v{__version__}")
    console.print()
    console.print("Requirements:")
    console.print("  - Node.js with npm, yarn, pnpm or bun on PATH")
    console.print()


__all__ = [
    "console",
    "console_err",
    "custom_theme",
    "print_error",
    "print_success",
    "print_warning",
    "print_info",
    "print_header",
    "print_step",
    "show_banner",
    "show_version",
]
