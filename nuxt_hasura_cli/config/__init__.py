"""Configuration management for create-nuxt-hasura-cli.

This package contains:
- settings: Settings dataclass with the saved CLI defaults
- manager: ConfigManager class for loading/saving configuration

Configuration Format
====================
A JSON object in .create-nuxt-hasura-cli.json:

    {
      "defaultHasuraEndpoint": "http://localhost:8080/v1/graphql",
      "defaultSchemaPath": "./schema.graphql",
      "defaultCodegenOutputDir": "./types/graphql"
    }
"""

from nuxt_hasura_cli.config.manager import ConfigManager
from nuxt_hasura_cli.config.settings import CONFIG_FILENAME, Settings

__all__ = [
    "Settings",
    "ConfigManager",
    "CONFIG_FILENAME",
]
