"""Settings dataclass for create-nuxt-hasura-cli defaults.

The settings are the answers saved by the ``config`` command and used as
prompt defaults by the other commands.
"""

from dataclasses import dataclass, field

from nuxt_hasura_cli import (
    DEFAULT_CODEGEN_OUTPUT_DIR,
    DEFAULT_HASURA_ENDPOINT,
    DEFAULT_SCHEMA_PATH,
)

# Stored in the directory the CLI is run from
CONFIG_FILENAME = ".create-nuxt-hasura-cli.json"

# Prefix of environment variables overriding a stored value
ENV_PREFIX = "NUXT_HASURA_CLI_"


@dataclass
class Settings:
    """CLI defaults.

    Attributes:
        default_hasura_endpoint: Hasura GraphQL endpoint offered by prompts
        default_schema_path: Schema file path offered by codegen/get-schema
        default_codegen_output_dir: Directory for generated types
        default_package_manager: npm/yarn/pnpm/bun; empty means detect from lockfile
    """

    default_hasura_endpoint: str = DEFAULT_HASURA_ENDPOINT
    default_schema_path: str = DEFAULT_SCHEMA_PATH
    default_codegen_output_dir: str = DEFAULT_CODEGEN_OUTPUT_DIR
    default_package_manager: str = ""

    # JSON key to attribute mapping
    _key_mapping: dict[str, str] = field(
        default_factory=lambda: {
            "defaultHasuraEndpoint": "default_hasura_endpoint",
            "defaultSchemaPath": "default_schema_path",
            "defaultCodegenOutputDir": "default_codegen_output_dir",
            "defaultPackageManager": "default_package_manager",
        },
        repr=False,
    )

    def get_attribute_for_key(self, key: str) -> str | None:
        """Get the attribute name for a config key."""
        return self._key_mapping.get(key)

    @classmethod
    def get_config_keys(cls) -> list[str]:
        """Get list of all valid configuration keys."""
        temp = cls()
        return list(temp._key_mapping.keys())

    @staticmethod
    def env_var_for_attribute(attr: str) -> str:
        """Environment variable overriding an attribute, e.g. NUXT_HASURA_CLI_DEFAULT_SCHEMA_PATH."""
        return f"{ENV_PREFIX}{attr.upper()}"


__all__ = [
    "Settings",
    "CONFIG_FILENAME",
    "ENV_PREFIX",
]
