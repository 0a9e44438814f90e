"""New project scaffolding."""

from pathlib import Path

from nuxt_hasura_cli.commands.codegen import setup_codegen
from nuxt_hasura_cli.commands.common import load_settings, report_failure, resolve_project_dir
from nuxt_hasura_cli.commands.get_schema import setup_get_schema
from nuxt_hasura_cli.commands.graphql_client import GraphqlClient, setup_graphql_client
from nuxt_hasura_cli.commands.hasura import setup_hasura
from nuxt_hasura_cli.commands.templates import require_valid, validate_project_name
from nuxt_hasura_cli.config.settings import Settings
from nuxt_hasura_cli.integrations.package_manager import (
    DEFAULT_PACKAGE_MANAGER,
    PackageManager,
    get_install_command,
    get_package_executor,
    get_run_script_command,
)
from nuxt_hasura_cli.integrations.process import ExecuteOptions, OutputMode, run_command
from nuxt_hasura_cli.ui.progress import step_status
from nuxt_hasura_cli.ui.prompts import prompt_select
from nuxt_hasura_cli.utils.console import console, print_step, print_warning
from nuxt_hasura_cli.utils.errors import NuxtHasuraError, ValidationError

NUXT_STARTER = "gh:nuxt/starter#v3"


def init_project(
    project_name: str,
    *,
    git: bool = True,
    hasura: bool = False,
    codegen: bool = False,
    get_schema: bool = False,
    graphql_client: GraphqlClient | None = None,
    package_manager: PackageManager | None = None,
    parent_dir: Path | str | None = None,
    settings: Settings | None = None,
) -> Path:
    """Create a Nuxt project and run the requested setup commands inside it.

    Args:
        project_name: Directory name of the new project
        git: Initialise a git repository (failure only warns)
        hasura: Run the Hasura setup
        codegen: Run the GraphQL Codegen setup
        get_schema: Run the schema download setup
        graphql_client: Client to set up, if any
        package_manager: Manager to use (prompted for when omitted)
        parent_dir: Directory the project is created in (defaults to cwd)
        settings: Prompt defaults for the setup commands

    Returns:
        Path of the new project

    Raises:
        ValidationError: If the name is invalid or the directory is not empty
        NuxtHasuraError: If the download, install, or a setup command fails
    """
    parent = resolve_project_dir(parent_dir)
    settings = load_settings(settings)
    project_dir = parent / project_name

    with report_failure("Nuxt project"):
        require_valid(validate_project_name, project_name, "project name")
        if project_dir.exists() and not project_dir.is_dir():
            raise ValidationError(f"'{project_name}' already exists and is not a directory")
        if project_dir.is_dir() and any(project_dir.iterdir()):
            raise ValidationError(f"Directory '{project_name}' already exists and is not empty")

        if package_manager is None:
            choices = [pm.value for pm in PackageManager]
            default = settings.default_package_manager
            package_manager = PackageManager(
                prompt_select(
                    "Select a package manager:",
                    choices=choices,
                    default=default if default in choices else DEFAULT_PACKAGE_MANAGER.value,
                )
            )

        with step_status(
            f"Creating Nuxt project: {project_name}",
            success=f"Nuxt project '{project_name}' created",
        ):
            run_command(
                f"{get_package_executor(package_manager)} giget@latest {NUXT_STARTER} {project_name}",
                ExecuteOptions(cwd=parent, output=OutputMode.CAPTURE),
            )

        with step_status("Installing dependencies"):
            run_command(
                get_install_command(package_manager),
                ExecuteOptions(cwd=project_dir, output=OutputMode.CAPTURE),
            )

    if git:
        _init_git(project_dir)

    if hasura:
        console.print()
        setup_hasura(project_dir, settings, skip_project_check=True)
    if codegen:
        console.print()
        setup_codegen(package_manager, project_dir, settings)
    if get_schema:
        console.print()
        setup_get_schema(package_manager, project_dir, settings)
    if graphql_client is not None:
        console.print()
        setup_graphql_client(graphql_client, package_manager, project_dir, settings)

    console.print()
    console.print("[success]✔ Project setup complete![/success]")
    console.print()
    print_step("Next steps:")
    console.print(f"  [cyan]cd[/cyan] {project_name}")
    console.print(f"  [cyan]{get_run_script_command(package_manager, 'dev')}[/cyan]")
    console.print()
    return project_dir


def _init_git(project_dir: Path) -> None:
    try:
        with step_status("Initializing git repository", success="Git repository initialized"):
            run_command("git init", ExecuteOptions(cwd=project_dir, output=OutputMode.CAPTURE))
    except NuxtHasuraError as e:
        print_warning(f"Failed to initialize git: {e}")


__all__ = [
    "NUXT_STARTER",
    "init_project",
]
