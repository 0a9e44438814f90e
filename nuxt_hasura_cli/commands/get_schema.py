"""get-graphql-schema setup: a package script that downloads the Hasura schema."""

from pathlib import Path

from nuxt_hasura_cli.commands.common import (
    install_packages,
    load_settings,
    report_failure,
    resolve_package_manager,
    resolve_project_dir,
)
from nuxt_hasura_cli.commands.templates import (
    ADMIN_SECRET_PLACEHOLDER,
    HASURA_ADMIN_SECRET_ENV,
    HASURA_ENDPOINT_LOCAL_ENV,
    build_fetch_schema_script,
    validate_endpoint,
    validate_path,
)
from nuxt_hasura_cli.config.settings import Settings
from nuxt_hasura_cli.integrations.env_file import (
    DEFAULT_ENV_FILENAME,
    EnvFileAction,
    EnvVariable,
    create_or_append_env_file,
)
from nuxt_hasura_cli.integrations.files import add_scripts_to_package_json
from nuxt_hasura_cli.integrations.package_manager import PackageManager, get_run_script_command
from nuxt_hasura_cli.ui.prompts import prompt_input
from nuxt_hasura_cli.utils.console import print_header, print_info, print_success

FETCH_SCHEMA_SCRIPT_NAME = "fetch:schema"


def setup_get_schema(
    package_manager: PackageManager | None = None,
    project_dir: Path | str | None = None,
    settings: Settings | None = None,
) -> None:
    """Add a ``fetch:schema`` script and the variables it reads.

    Raises:
        NuxtHasuraError: If a step fails; later steps are not run
    """
    root = resolve_project_dir(project_dir)
    settings = load_settings(settings)

    print_header("GraphQL Schema Download")
    with report_failure("get-schema"):
        endpoint = prompt_input(
            "Enter your GraphQL schema endpoint:",
            default=settings.default_hasura_endpoint,
            validate=validate_endpoint,
        )
        output_path = prompt_input(
            "Enter the output path for the schema file:",
            default=settings.default_schema_path,
            validate=validate_path,
        )
        script = build_fetch_schema_script(output_path)

        pm = resolve_package_manager(package_manager, root, settings)
        install_packages(["get-graphql-schema"], pm, root, dev=True)
        install_packages(["dotenv-cli"], pm, root, dev=True)

        add_scripts_to_package_json({FETCH_SCHEMA_SCRIPT_NAME: script}, root)
        print_success("Scripts added to package.json")

        result = create_or_append_env_file(
            root / DEFAULT_ENV_FILENAME,
            [
                EnvVariable(HASURA_ENDPOINT_LOCAL_ENV, endpoint),
                EnvVariable(HASURA_ADMIN_SECRET_ENV, ADMIN_SECRET_PLACEHOLDER),
            ],
            header="GraphQL Configuration",
        )
        if result.action is EnvFileAction.CREATED:
            print_success(f"{DEFAULT_ENV_FILENAME} created")
        elif result.action is EnvFileAction.APPENDED:
            print_success(f"Added missing GraphQL variables to {DEFAULT_ENV_FILENAME}")
        else:
            print_info(f"{DEFAULT_ENV_FILENAME} already defines the GraphQL variables, skipping")

    print_info(f"Download the schema with: {get_run_script_command(pm, FETCH_SCHEMA_SCRIPT_NAME)}")
