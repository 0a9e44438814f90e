"""CLI interface for create-nuxt-hasura-cli.

This module provides the Typer-based command-line interface. Commands are
declared once in COMMANDS and registered onto a fresh Typer app by
build_app(), so tests can build isolated apps.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Annotated

import typer

from nuxt_hasura_cli import SCRIPT_NAME
from nuxt_hasura_cli.commands.codegen import setup_codegen
from nuxt_hasura_cli.commands.config import configure_defaults
from nuxt_hasura_cli.commands.get_schema import setup_get_schema
from nuxt_hasura_cli.commands.graphql_client import GraphqlClient, setup_graphql_client
from nuxt_hasura_cli.commands.hasura import setup_hasura
from nuxt_hasura_cli.commands.init import init_project
from nuxt_hasura_cli.integrations.package_manager import PackageManager
from nuxt_hasura_cli.utils.console import print_info, show_banner, show_version
from nuxt_hasura_cli.utils.errors import ExitCode, NuxtHasuraError, UserCancelledError
from nuxt_hasura_cli.utils.logging import log_message, setup_logging


def version_callback(value: bool) -> None:
    """Display version and exit."""
    if value:
        show_version()
        raise typer.Exit()


def _run(action: Callable[[], object]) -> None:
    """Run a command body and map failures to exit codes.

    Setup commands print their own failure message before raising, so
    NuxtHasuraError only sets the exit code here.
    """
    setup_logging()
    try:
        action()
    except UserCancelledError as e:
        print_info(f"\n{e}")
        raise typer.Exit(ExitCode.USER_CANCELLED) from e
    except NuxtHasuraError as e:
        log_message(f"Command failed: {e}")
        raise typer.Exit(e.exit_code) from e
    except KeyboardInterrupt as e:
        print_info("\nOperation cancelled by user")
        raise typer.Exit(ExitCode.USER_CANCELLED) from e


def init_command(
    project_name: Annotated[str, typer.Argument(help="Name of the Nuxt.js project")],
    git: Annotated[
        bool,
        typer.Option("--git/--no-git", help="Initialize a git repository"),
    ] = True,
    hasura: Annotated[
        bool,
        typer.Option("--hasura", help="Set up Hasura GraphQL"),
    ] = False,
    codegen: Annotated[
        bool,
        typer.Option("--codegen", help="Set up GraphQL Codegen"),
    ] = False,
    get_schema: Annotated[
        bool,
        typer.Option("--get-schema", help="Set up get-graphql-schema"),
    ] = False,
    graphql_client: Annotated[
        GraphqlClient | None,
        typer.Option("--graphql-client", help="Set up a GraphQL client"),
    ] = None,
    package_manager: Annotated[
        PackageManager | None,
        typer.Option("--package-manager", "-p", help="Package manager (prompted when omitted)"),
    ] = None,
) -> None:
    """Initialize a new Nuxt.js project."""
    show_banner()
    _run(
        lambda: init_project(
            project_name,
            git=git,
            hasura=hasura,
            codegen=codegen,
            get_schema=get_schema,
            graphql_client=graphql_client,
            package_manager=package_manager,
        )
    )


def hasura_command() -> None:
    """Set up GraphQL with Hasura in the Nuxt.js project."""
    _run(setup_hasura)


def codegen_command(
    package_manager: Annotated[
        PackageManager | None,
        typer.Option("--package-manager", "-p", help="Package manager (detected when omitted)"),
    ] = None,
) -> None:
    """Integrate GraphQL Codegen into the Nuxt.js project."""
    _run(lambda: setup_codegen(package_manager))


def get_schema_command(
    package_manager: Annotated[
        PackageManager | None,
        typer.Option("--package-manager", "-p", help="Package manager (detected when omitted)"),
    ] = None,
) -> None:
    """Add a script that fetches the GraphQL schema from Hasura."""
    _run(lambda: setup_get_schema(package_manager))


def graphql_client_command(
    client: Annotated[
        GraphqlClient | None,
        typer.Option("--client", help="GraphQL client (prompted when omitted)"),
    ] = None,
    package_manager: Annotated[
        PackageManager | None,
        typer.Option("--package-manager", "-p", help="Package manager (detected when omitted)"),
    ] = None,
) -> None:
    """Integrate Nuxt Apollo or Urql into the Nuxt.js project."""
    _run(lambda: setup_graphql_client(client, package_manager))


def config_command(
    show: Annotated[
        bool,
        typer.Option("--show", help="Show current configuration and exit"),
    ] = False,
) -> None:
    """Configure the defaults offered by the setup prompts."""
    _run(lambda: configure_defaults(show=show))


@dataclass(frozen=True)
class CommandSpec:
    """A subcommand: its name and the function Typer introspects."""

    name: str
    callback: Callable[..., None]


COMMANDS: tuple[CommandSpec, ...] = (
    CommandSpec("init", init_command),
    CommandSpec("hasura", hasura_command),
    CommandSpec("codegen", codegen_command),
    CommandSpec("get-schema", get_schema_command),
    CommandSpec("graphql-client", graphql_client_command),
    CommandSpec("config", config_command),
)


def build_app(commands: tuple[CommandSpec, ...] = COMMANDS) -> typer.Typer:
    """Create the Typer app with the given subcommands."""
    new_app = typer.Typer(
        name=SCRIPT_NAME,
        help="CLI to create Nuxt.js projects with Hasura, GraphQL Codegen, and Apollo/Urql setup.",
        add_completion=False,
        no_args_is_help=True,
    )

    @new_app.callback()
    def main(
        version: Annotated[
            bool | None,
            typer.Option(
                "--version",
                "-v",
                callback=version_callback,
                is_eager=True,
                help="Show version information",
            ),
        ] = None,
    ) -> None:
        """Create Nuxt.js projects with Hasura and GraphQL tooling."""

    for command in commands:
        new_app.command(name=command.name)(command.callback)

    return new_app


app = build_app()


__all__ = [
    "CommandSpec",
    "COMMANDS",
    "build_app",
    "app",
    "version_callback",
]
