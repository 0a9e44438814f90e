"""Interactive prompts for create-nuxt-hasura-cli.

This module provides Questionary-based user input prompts with
consistent styling and error handling.
"""

from collections.abc import Callable

import questionary
from questionary import Style

from nuxt_hasura_cli.utils.errors import UserCancelledError
from nuxt_hasura_cli.utils.logging import log_message

# Custom style matching the application theme
custom_style = Style(
    [
        ("qmark", "fg:cyan bold"),
        ("question", "bold"),
        ("answer", "fg:green bold"),
        ("pointer", "fg:cyan bold"),
        ("highlighted", "fg:cyan bold"),
        ("selected", "fg:green"),
        ("separator", "fg:cyan"),
        ("instruction", "fg:white"),
        ("text", ""),
        ("disabled", "fg:gray italic"),
    ]
)

# Returns True when valid, or an error message to show under the prompt
Validator = Callable[[str], bool | str]


def prompt_input(
    message: str,
    default: str = "",
    *,
    validate: Validator | None = None,
) -> str:
    """Prompt for text input.

    Args:
        message: Prompt message
        default: Value used when the user just presses Enter
        validate: Optional validation function; invalid input is asked again

    Returns:
        User input string

    Raises:
        UserCancelledError: If user presses Ctrl+C
    """
    log_message(f"Prompt input: {message}")

    try:
        result = questionary.text(
            message,
            default=default,
            validate=validate,
            style=custom_style,
        ).ask()

        if result is None:
            raise UserCancelledError("User cancelled input prompt")

        log_message(f"User input: {result[:50]}")
        return result

    except KeyboardInterrupt:
        raise UserCancelledError("User cancelled with Ctrl+C")


def prompt_password(message: str) -> str:
    """Prompt for a secret; the answer is never logged.

    Raises:
        UserCancelledError: If user presses Ctrl+C
    """
    log_message(f"Prompt password: {message}")

    try:
        result = questionary.password(message, style=custom_style).ask()

        if result is None:
            raise UserCancelledError("User cancelled password prompt")

        return result

    except KeyboardInterrupt:
        raise UserCancelledError("User cancelled with Ctrl+C")


def prompt_select(
    message: str,
    choices: list[str],
    default: str | None = None,
) -> str:
    """Prompt for single selection from list.

    Raises:
        UserCancelledError: If user presses Ctrl+C
    """
    log_message(f"Prompt select: {message}")

    try:
        result = questionary.select(
            message,
            choices=choices,
            default=default,
            style=custom_style,
        ).ask()

        if result is None:
            raise UserCancelledError("User cancelled selection prompt")

        log_message(f"User selected: {result}")
        return result

    except KeyboardInterrupt:
        raise UserCancelledError("User cancelled with Ctrl+C")


__all__ = [
    "custom_style",
    "Validator",
    "prompt_input",
    "prompt_password",
    "prompt_select",
]
