"""dotenv file creation and merging.

Writes KEY=value files such as .env.example. Appending never touches a key
that is already present, so re-running a setup command is safe.
"""

import json
import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from nuxt_hasura_cli.integrations.files import write_file
from nuxt_hasura_cli.utils.errors import ValidationError
from nuxt_hasura_cli.utils.logging import log_message

DEFAULT_ENV_FILENAME = ".env.example"

_KEY_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")
# Values containing any of these need double quotes to survive dotenv parsing
_NEEDS_QUOTES = re.compile(r"[\s#'\"`\\]")


@dataclass(frozen=True)
class EnvVariable:
    """A single dotenv entry.

    Attributes:
        key: Variable name
        value: Variable value (written quoted when necessary)
        comment: Optional comment line written above the entry
    """

    key: str
    value: str
    comment: str | None = None


class EnvFileAction(Enum):
    """What create_or_append_env_file() did to the file."""

    CREATED = "created"
    APPENDED = "appended"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class EnvFileResult:
    action: EnvFileAction
    path: Path

    @property
    def created(self) -> bool:
        return self.action is EnvFileAction.CREATED


def _format_value(value: str) -> str:
    if "\n" in value or "\r" in value:
        raise ValidationError("Environment values cannot contain line breaks")
    if value and _NEEDS_QUOTES.search(value):
        return json.dumps(value)
    return value


def _format_block(variables: list[EnvVariable], header: str | None) -> str:
    lines: list[str] = []
    if header:
        lines.append(f"# {header}")
    for variable in variables:
        if not _KEY_PATTERN.match(variable.key):
            raise ValidationError(f"Invalid environment variable name: {variable.key!r}")
        if variable.comment:
            lines.append(f"# {variable.comment}")
        lines.append(f"{variable.key}={_format_value(variable.value)}")
    return "\n".join(lines) + "\n"


def has_env_key(content: str, key: str) -> bool:
    """Check whether a dotenv text already assigns a key.

    Matches "KEY=" at the start of a line, optionally prefixed with "export".
    """
    pattern = re.compile(rf"^\s*(?:export\s+)?{re.escape(key)}\s*=", re.MULTILINE)
    return pattern.search(content) is not None


def _first_of_each_key(variables: list[EnvVariable]) -> list[EnvVariable]:
    seen: set[str] = set()
    unique = []
    for variable in variables:
        if variable.key not in seen:
            seen.add(variable.key)
            unique.append(variable)
    return unique


def create_or_append_env_file(
    path: Path | str,
    variables: list[EnvVariable],
    *,
    header: str | None = None,
    overwrite: bool = False,
) -> EnvFileResult:
    """Create a dotenv file, or append the variables it does not have yet.

    Args:
        path: The dotenv file, e.g. PROJECT/.env.example
        variables: Entries to write, in order; a repeated key keeps its first value
        header: Optional comment written above the block
        overwrite: Replace an existing file instead of merging into it

    Returns:
        EnvFileResult with CREATED, APPENDED, or SKIPPED (file left untouched)

    Raises:
        ValidationError: If a key or value cannot be represented in a dotenv file
        FileWriteError: If the file cannot be written
    """
    env_path = Path(path)
    variables = _first_of_each_key(variables)

    if overwrite or not env_path.exists():
        write_file(env_path, _format_block(variables, header))
        log_message(f"Created {env_path} with {len(variables)} variable(s)")
        return EnvFileResult(EnvFileAction.CREATED, env_path)

    existing = env_path.read_text(encoding="utf-8")
    new_variables = [v for v in variables if not has_env_key(existing, v.key)]

    if not new_variables:
        log_message(f"All variables already present in {env_path}, skipping")
        return EnvFileResult(EnvFileAction.SKIPPED, env_path)

    if not existing:
        separator = ""
    elif existing.endswith("\n"):
        separator = "\n"
    else:
        separator = "\n\n"
    content = existing + separator + _format_block(new_variables, header)
    write_file(env_path, content)
    log_message(f"Appended {len(new_variables)} variable(s) to {env_path}")
    return EnvFileResult(EnvFileAction.APPENDED, env_path)


__all__ = [
    "DEFAULT_ENV_FILENAME",
    "EnvVariable",
    "EnvFileAction",
    "EnvFileResult",
    "has_env_key",
    "create_or_append_env_file",
]
