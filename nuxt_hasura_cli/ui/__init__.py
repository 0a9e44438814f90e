"""UI components for create-nuxt-hasura-cli.

This package contains:
- prompts: Questionary-based user input prompts
- progress: Rich spinners around long-running steps
"""

from nuxt_hasura_cli.ui.progress import step_status
from nuxt_hasura_cli.ui.prompts import (
    custom_style,
    prompt_input,
    prompt_password,
    prompt_select,
)

__all__ = [
    "custom_style",
    "prompt_input",
    "prompt_password",
    "prompt_select",
    "step_status",
]
