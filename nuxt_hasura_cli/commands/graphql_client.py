"""Apollo or Urql client setup."""

from enum import Enum
from pathlib import Path

from nuxt_hasura_cli.commands.common import (
    install_packages,
    load_settings,
    report_failure,
    resolve_package_manager,
    resolve_project_dir,
)
from nuxt_hasura_cli.commands.templates import (
    HASURA_ENDPOINT_ENV,
    render_apollo_client,
    render_urql_plugin,
    validate_token_name,
)
from nuxt_hasura_cli.config.settings import Settings
from nuxt_hasura_cli.integrations.files import ensure_directory_exists, write_file
from nuxt_hasura_cli.integrations.package_manager import PackageManager
from nuxt_hasura_cli.nuxt.config import add_apollo_config, add_nuxt_module, add_runtime_config
from nuxt_hasura_cli.nuxt.project import feature_directory
from nuxt_hasura_cli.ui.prompts import prompt_input, prompt_select
from nuxt_hasura_cli.utils.console import console, print_header, print_success


class GraphqlClient(Enum):
    """Supported GraphQL clients."""

    APOLLO = "apollo"
    URQL = "urql"


APOLLO_MODULE = "@nuxtjs/apollo"
URQL_PACKAGES = ["@urql/vue", "graphql"]


def setup_graphql_client(
    client: GraphqlClient | None = None,
    package_manager: PackageManager | None = None,
    project_dir: Path | str | None = None,
    settings: Settings | None = None,
) -> None:
    """Install and wire a GraphQL client into the Nuxt project.

    Args:
        client: Client to set up (prompted for when omitted)
        package_manager: Manager to install with (detected when omitted)
        project_dir: Project root (defaults to the current directory)
        settings: Saved defaults (loaded from the config file when omitted)

    Raises:
        NuxtHasuraError: If a step fails; later steps are not run
    """
    root = resolve_project_dir(project_dir)
    settings = load_settings(settings)

    print_header("GraphQL Client")
    with report_failure("GraphQL client"):
        if client is None:
            client = GraphqlClient(
                prompt_select(
                    "Which GraphQL client do you want to use?",
                    choices=[c.value for c in GraphqlClient],
                )
            )

        pm = resolve_package_manager(package_manager, root, settings)
        if client is GraphqlClient.APOLLO:
            _setup_apollo(pm, root)
        else:
            _setup_urql(pm, root)


def _setup_apollo(pm: PackageManager, root: Path) -> None:
    token_name = prompt_input(
        "Enter the token name for Apollo:",
        default="apollo:app.token",
        validate=validate_token_name,
    )

    install_packages([APOLLO_MODULE], pm, root, label="Nuxt Apollo dependencies")

    config_dir = feature_directory("apollo", root)
    ensure_directory_exists(root / config_dir)
    write_file(root / config_dir / "apollo.ts", render_apollo_client(token_name))
    print_success(f"Apollo configuration created at {config_dir}/apollo.ts")

    add_nuxt_module(APOLLO_MODULE, root)
    add_apollo_config(f"./{config_dir}/apollo.ts", root)


def _setup_urql(pm: PackageManager, root: Path) -> None:
    cookie_name = prompt_input(
        "Enter the cookie name for authentication:",
        default="auth-token",
        validate=validate_token_name,
    )

    install_packages(URQL_PACKAGES, pm, root, label="Nuxt Urql dependencies")

    plugins_dir = feature_directory("plugins", root)
    ensure_directory_exists(root / plugins_dir)
    write_file(root / plugins_dir / "urql.ts", render_urql_plugin(cookie_name))
    print_success(f"Urql configuration created at {plugins_dir}/urql.ts")

    add_runtime_config(
        "hasuraGraphqlEndpoint",
        f"process.env.{HASURA_ENDPOINT_ENV}",
        public=True,
        raw=True,
        project_dir=root,
    )
    console.print("\n[green]Urql has been configured with authentication support using useCookie.[/green]")


__all__ = [
    "GraphqlClient",
    "setup_graphql_client",
]
