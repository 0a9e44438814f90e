"""Saved prompt defaults."""

from nuxt_hasura_cli.commands.templates import validate_endpoint, validate_path
from nuxt_hasura_cli.config.manager import ConfigManager
from nuxt_hasura_cli.integrations.package_manager import PackageManager
from nuxt_hasura_cli.ui.prompts import prompt_input, prompt_select
from nuxt_hasura_cli.utils.console import print_header, print_success

DETECT_CHOICE = "detect from lockfile"


def configure_defaults(show: bool = False, manager: ConfigManager | None = None) -> None:
    """Ask for new defaults and save them, or print the current ones.

    Args:
        show: Only print the effective settings
        manager: Config manager to use (defaults to the current directory's file)
    """
    manager = manager or ConfigManager()
    settings = manager.load()

    if show:
        manager.show()
        return

    print_header("Configure Defaults")
    values = {
        "defaultHasuraEndpoint": prompt_input(
            "Default Hasura GraphQL endpoint:",
            default=settings.default_hasura_endpoint,
            validate=validate_endpoint,
        ),
        "defaultSchemaPath": prompt_input(
            "Default GraphQL schema path:",
            default=settings.default_schema_path,
            validate=validate_path,
        ),
        "defaultCodegenOutputDir": prompt_input(
            "Default output directory for generated types:",
            default=settings.default_codegen_output_dir,
            validate=validate_path,
        ),
    }
    choices = [DETECT_CHOICE, *(pm.value for pm in PackageManager)]
    current = settings.default_package_manager
    choice = prompt_select(
        "Default package manager:",
        choices=choices,
        default=current if current in choices else DETECT_CHOICE,
    )
    values["defaultPackageManager"] = "" if choice == DETECT_CHOICE else choice

    path = manager.save(values)
    print_success(f"Configuration saved to {path}")


__all__ = [
    "configure_defaults",
]
