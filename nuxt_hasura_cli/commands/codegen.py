"""GraphQL Code Generator setup."""

from pathlib import Path

from nuxt_hasura_cli.commands.common import (
    install_packages,
    load_settings,
    report_failure,
    resolve_package_manager,
    resolve_project_dir,
)
from nuxt_hasura_cli.commands.templates import (
    CODEGEN_CONFIG_FILENAME,
    render_codegen_config,
    validate_path,
)
from nuxt_hasura_cli.config.settings import Settings
from nuxt_hasura_cli.integrations.files import add_scripts_to_package_json, write_file
from nuxt_hasura_cli.integrations.package_manager import (
    PackageManager,
    get_local_executor,
    get_run_script_command,
)
from nuxt_hasura_cli.integrations.process import ExecuteOptions, OutputMode, run_command
from nuxt_hasura_cli.ui.progress import step_status
from nuxt_hasura_cli.ui.prompts import prompt_input
from nuxt_hasura_cli.utils.console import print_header, print_info, print_success

CODEGEN_PACKAGES = [
    "@graphql-codegen/cli",
    "@graphql-codegen/typescript",
    "@graphql-codegen/typescript-operations",
    "@graphql-codegen/typed-document-node",
]

CODEGEN_SCRIPT = f"graphql-codegen --config {CODEGEN_CONFIG_FILENAME}"


def setup_codegen(
    package_manager: PackageManager | None = None,
    project_dir: Path | str | None = None,
    settings: Settings | None = None,
) -> None:
    """Install GraphQL Code Generator, write codegen.ts and generate types once.

    Args:
        package_manager: Manager to install with (detected when omitted)
        project_dir: Project root (defaults to the current directory)
        settings: Prompt defaults (loaded from the config file when omitted)

    Raises:
        NuxtHasuraError: If a step fails; later steps are not run
    """
    root = resolve_project_dir(project_dir)
    settings = load_settings(settings)

    print_header("GraphQL Codegen")
    with report_failure("GraphQL Codegen"):
        schema_path = prompt_input(
            "Enter the path to your GraphQL schema file:",
            default=settings.default_schema_path,
            validate=validate_path,
        )
        output_dir = prompt_input(
            "Enter the output directory for generated types:",
            default=settings.default_codegen_output_dir,
            validate=validate_path,
        )

        pm = resolve_package_manager(package_manager, root, settings)
        install_packages(CODEGEN_PACKAGES, pm, root, dev=True, label="GraphQL Codegen dependencies")

        write_file(root / CODEGEN_CONFIG_FILENAME, render_codegen_config(schema_path, output_dir))
        print_success(f"Created {CODEGEN_CONFIG_FILENAME}")

        if (root / "package.json").is_file():
            add_scripts_to_package_json({"codegen": CODEGEN_SCRIPT}, root)
            print_success("Added 'codegen' script to package.json")

        with step_status("Generating GraphQL types", success="GraphQL types generated"):
            run_command(
                f"{get_local_executor(pm)} {CODEGEN_SCRIPT}",
                ExecuteOptions(cwd=root, output=OutputMode.CAPTURE),
            )

    print_info(f"Regenerate types with: {get_run_script_command(pm, 'codegen')}")
