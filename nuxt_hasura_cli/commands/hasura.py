"""Hasura connection setup."""

from pathlib import Path

from rich.markup import escape

from nuxt_hasura_cli.commands.common import load_settings, report_failure, resolve_project_dir
from nuxt_hasura_cli.commands.templates import (
    ADMIN_SECRET_PLACEHOLDER,
    HASURA_ADMIN_SECRET_ENV,
    HASURA_ENDPOINT_ENV,
    validate_endpoint,
)
from nuxt_hasura_cli.config.settings import Settings
from nuxt_hasura_cli.integrations.env_file import (
    DEFAULT_ENV_FILENAME,
    EnvFileAction,
    EnvVariable,
    create_or_append_env_file,
)
from nuxt_hasura_cli.nuxt.config import ConfigUpdateStatus, add_runtime_config
from nuxt_hasura_cli.nuxt.project import ensure_project_initialized
from nuxt_hasura_cli.ui.prompts import prompt_input, prompt_password
from nuxt_hasura_cli.utils.console import console, print_header, print_info, print_success

LOCAL_ENV_FILENAME = ".env"


def setup_hasura(
    project_dir: Path | str | None = None,
    settings: Settings | None = None,
    *,
    skip_project_check: bool = False,
) -> None:
    """Record the Hasura endpoint and admin secret for the project.

    The endpoint and a placeholder secret go to .env.example; a real secret
    only ever goes to .env. Both are exposed through runtimeConfig, the
    secret on the server side only.

    Args:
        project_dir: Project root (defaults to the current directory)
        settings: Prompt defaults (loaded from the config file when omitted)
        skip_project_check: Skip the Nuxt project check (used by init)

    Raises:
        ProjectNotInitializedError: If the directory is not a Nuxt project
        NuxtHasuraError: If a later step fails
    """
    root = resolve_project_dir(project_dir)
    settings = load_settings(settings)

    print_header("Hasura")
    with report_failure("GraphQL with Hasura"):
        if not skip_project_check:
            ensure_project_initialized(root)

        endpoint = prompt_input(
            "Enter your Hasura GraphQL endpoint:",
            default=settings.default_hasura_endpoint,
            validate=validate_endpoint,
        )
        admin_secret = prompt_password(
            "Enter your Hasura admin secret (leave blank if not applicable):"
        )

        example = create_or_append_env_file(
            root / DEFAULT_ENV_FILENAME,
            [
                EnvVariable(HASURA_ENDPOINT_ENV, endpoint),
                EnvVariable(HASURA_ADMIN_SECRET_ENV, ADMIN_SECRET_PLACEHOLDER),
            ],
            header="Hasura",
        )
        _report_env_file(DEFAULT_ENV_FILENAME, example.action)

        if admin_secret:
            local = create_or_append_env_file(
                root / LOCAL_ENV_FILENAME,
                [
                    EnvVariable(HASURA_ENDPOINT_ENV, endpoint),
                    EnvVariable(HASURA_ADMIN_SECRET_ENV, admin_secret),
                ],
            )
            _report_env_file(LOCAL_ENV_FILENAME, local.action)

        status = add_runtime_config(
            "hasuraGraphqlEndpoint",
            f"process.env.{HASURA_ENDPOINT_ENV}",
            public=True,
            raw=True,
            project_dir=root,
        )
        if status is ConfigUpdateStatus.UPDATED:
            add_runtime_config(
                "hasuraGraphqlAdminSecret",
                f"process.env.{HASURA_ADMIN_SECRET_ENV}",
                raw=True,
                project_dir=root,
            )
            print_success("Added Hasura entries to runtimeConfig")

    console.print()
    console.print("[info]Hasura configuration:[/info]")
    console.print(f"  Endpoint: {escape(endpoint)}")
    console.print(f"  Admin Secret: {'******' if admin_secret else 'None'}")


def _report_env_file(filename: str, action: EnvFileAction) -> None:
    if action is EnvFileAction.CREATED:
        print_success(f"{filename} created")
    elif action is EnvFileAction.APPENDED:
        print_success(f"Added Hasura variables to {filename}")
    else:
        print_info(f"{filename} already defines the Hasura variables, skipping")
