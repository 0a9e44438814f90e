"""Setup commands for create-nuxt-hasura-cli.

This package contains:
- init: Scaffold a new Nuxt project and run the selected setups
- hasura: Hasura endpoint/secret env files and runtimeConfig
- codegen: GraphQL Code Generator install, codegen.ts and first run
- get_schema: fetch:schema package script
- graphql_client: Apollo or Urql client wiring
- config: Saved prompt defaults
- templates: Generated file contents and input validation
"""

from nuxt_hasura_cli.commands.codegen import setup_codegen
from nuxt_hasura_cli.commands.config import configure_defaults
from nuxt_hasura_cli.commands.get_schema import setup_get_schema
from nuxt_hasura_cli.commands.graphql_client import GraphqlClient, setup_graphql_client
from nuxt_hasura_cli.commands.hasura import setup_hasura
from nuxt_hasura_cli.commands.init import init_project

__all__ = [
    "GraphqlClient",
    "init_project",
    "setup_hasura",
    "setup_codegen",
    "setup_get_schema",
    "setup_graphql_client",
    "configure_defaults",
]
