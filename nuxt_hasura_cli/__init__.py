"""create-nuxt-hasura-cli - scaffold Nuxt projects wired to Hasura GraphQL.

This package provides a Python CLI that bootstraps Nuxt.js projects and
sets up GraphQL tooling (Hasura settings, schema fetching, GraphQL Codegen,
Apollo or Urql clients) by driving the project's JavaScript package manager.
"""

__version__ = "1.0.0"
SCRIPT_NAME = "create-nuxt-hasura-cli"
DEFAULT_HASURA_ENDPOINT = "http://localhost:8080/v1/graphql"
DEFAULT_SCHEMA_PATH = "./schema.graphql"
DEFAULT_CODEGEN_OUTPUT_DIR = "./types/graphql"

__all__ = [
    "__version__",
    "SCRIPT_NAME",
    "DEFAULT_HASURA_ENDPOINT",
    "DEFAULT_SCHEMA_PATH",
    "DEFAULT_CODEGEN_OUTPUT_DIR",
]
